"""
Icon and color choices offered when creating a habit.
The first entry of each list is the form default.
"""

HABIT_ICONS = [
    "\U0001F4A7",  # droplet
    "\U0001F3C3\u200d\u2642\ufe0f",  # runner
    "\U0001F4DA",  # books
    "\U0001F9D8\u200d\u2640\ufe0f",  # lotus position
    "\U0001F634",  # sleeping face
    "\U0001F34E",  # apple
    "\U0001F4AA",  # flexed biceps
    "\U0001F9E0",  # brain
    "\U0001F3AF",  # direct hit
    "\U0001F3A8",  # palette
    "\U0001F3B5",  # musical note
    "\U0001F331",  # seedling
]

HABIT_COLORS = [
    "#3B82F6",  # blue
    "#EF4444",  # red
    "#10B981",  # green
    "#8B5CF6",  # purple
    "#EC4899",  # pink
    "#F59E0B",  # amber
]

DEFAULT_ICON = HABIT_ICONS[0]
DEFAULT_COLOR = HABIT_COLORS[0]
