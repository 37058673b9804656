"""
Key identifiers and classification.

Key values are X11 keysyms, the same numbers IBus hands to
``do_process_key_event`` (``IBus.KEY_*``). They are spelled out here so the
composition logic does not depend on gi.
"""

KEY_SPACE = 0x0020
KEY_BACKSPACE = 0xff08
KEY_TAB = 0xff09
KEY_RETURN = 0xff0d
KEY_ESCAPE = 0xff1b
KEY_HANGUL = 0xff31
KEY_HOME = 0xff50
KEY_LEFT = 0xff51
KEY_UP = 0xff52
KEY_RIGHT = 0xff53
KEY_DOWN = 0xff54
KEY_PAGE_UP = 0xff55
KEY_PAGE_DOWN = 0xff56
KEY_END = 0xff57
KEY_KP_ENTER = 0xff8d
KEY_DELETE = 0xffff
KEY_ISO_LEFT_TAB = 0xfe20
KEY_ISO_LEVEL3_SHIFT = 0xfe03

# Shift_L .. Hyper_R, including Caps_Lock, Meta and Super.
MODIFIER_FIRST = 0xffe1
MODIFIER_LAST = 0xffee

NAVIGATION_KEYS = frozenset([
    KEY_TAB, KEY_ISO_LEFT_TAB, KEY_DELETE,
    KEY_HOME, KEY_END, KEY_PAGE_UP, KEY_PAGE_DOWN,
    KEY_LEFT, KEY_UP, KEY_RIGHT, KEY_DOWN,
    # Keypad variants
    0xff95, 0xff96, 0xff97, 0xff98, 0xff99, 0xff9a, 0xff9b, 0xff9c, 0xff9f,
])

KIND_LETTER, \
KIND_BACKSPACE, \
KIND_ENTER, \
KIND_ESCAPE, \
KIND_SPACE, \
KIND_NAVIGATION, \
KIND_MODIFIER, \
KIND_OTHER = range(8)

NAMED_KEYS = {
    "Space": KEY_SPACE,
    "Hangul": KEY_HANGUL,
}


class KeyEvent:
    """A key press with the modifiers held at the time."""

    def __init__(self, keyval, shift=False, ctrl=False, alt=False):
        self.keyval = keyval
        self.shift = shift
        self.ctrl = ctrl
        self.alt = alt

    def __repr__(self):
        return (f"KeyEvent(0x{self.keyval:04x}, shift={self.shift}, "
                f"ctrl={self.ctrl}, alt={self.alt})")


def keyval_to_letter(keyval):
    """Lower-case Latin letter for A-Z / a-z keyvals, else None."""
    if 0x41 <= keyval <= 0x5a:
        return chr(keyval + 0x20)
    if 0x61 <= keyval <= 0x7a:
        return chr(keyval)
    return None


def normalize_keyval(keyval):
    # Shift+S arrives as 'S'; toggle keys compare on the lower-case keysym.
    if 0x41 <= keyval <= 0x5a:
        return keyval + 0x20
    return keyval


def classify(keyval):
    if keyval_to_letter(keyval) is not None:
        return KIND_LETTER
    if keyval == KEY_BACKSPACE:
        return KIND_BACKSPACE
    if keyval in (KEY_RETURN, KEY_KP_ENTER):
        return KIND_ENTER
    if keyval == KEY_ESCAPE:
        return KIND_ESCAPE
    if keyval == KEY_SPACE:
        return KIND_SPACE
    if keyval in NAVIGATION_KEYS:
        return KIND_NAVIGATION
    if MODIFIER_FIRST <= keyval <= MODIFIER_LAST or keyval == KEY_ISO_LEVEL3_SHIFT:
        return KIND_MODIFIER
    return KIND_OTHER


def key_name_to_keyval(name):
    """Map a configuration key name to a keyval.

    Accepted names are "A" to "Z", "0" to "9", "Space" and "Hangul".
    Returns None for anything else, lower-case letters included.
    """
    if len(name) == 1:
        if "A" <= name <= "Z":
            return ord(name.lower())
        if "0" <= name <= "9":
            return ord(name)
    return NAMED_KEYS.get(name)


def keyval_to_key_name(keyval):
    letter = keyval_to_letter(keyval)
    if letter is not None:
        return letter.upper()
    if 0x30 <= keyval <= 0x39:
        return chr(keyval)
    for name, value in NAMED_KEYS.items():
        if value == keyval:
            return name
    return None
