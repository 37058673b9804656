"""
Composition state machine.

One ``Composer`` belongs to one input context. It owns the romanized buffer
and the enabled flag, and turns key presses into calls on a composition host
(the document the text goes into) and a preview display. A composition is
open exactly while the buffer is non-empty.
"""
import logging

from romhan import keys
from romhan.config import ToggleKey
from romhan.hangul import HangulConverter
from romhan.user_dict import UserDict

logger = logging.getLogger(__name__)


class CompositionHost:
    """Surface that shows the pending text and finalizes or discards it."""

    def begin(self):
        raise NotImplementedError

    def update(self, text):
        raise NotImplementedError

    def commit(self):
        raise NotImplementedError

    def cancel(self):
        raise NotImplementedError


class PreviewDisplay:
    """Shows the converted text next to the raw input. Does nothing by default."""

    def show(self, composed, raw, anchor):
        pass

    def hide(self):
        pass


class Composer:
    def __init__(self, host, preview=None, converter=None, user_dict=None, toggle_key=None):
        self.host = host
        self.preview = preview if preview is not None else PreviewDisplay()
        self.converter = converter if converter is not None else HangulConverter()
        self.user_dict = user_dict if user_dict is not None else UserDict.empty()
        self.toggle_key = toggle_key if toggle_key is not None else ToggleKey()
        self.enabled = True
        self.anchor = (0, 0)
        self.composed_text = ""
        self._buffer = []

    @property
    def buffer(self):
        return "".join(self._buffer)

    @property
    def is_composing(self):
        return bool(self._buffer)

    def process_key(self, event):
        """Handle one key press. Returns True if the key was consumed."""
        if self.toggle_key.matches(event):
            self.toggle()
            return True

        if not self.enabled:
            return False

        kind = keys.classify(event.keyval)
        if kind == keys.KIND_MODIFIER:
            return False

        # Leave shortcuts to the application.
        if event.ctrl or event.alt:
            if self.is_composing:
                self._commit()
            return False

        if kind == keys.KIND_LETTER:
            letter = keys.keyval_to_letter(event.keyval)
            if letter in self.converter.letters:
                self._append(letter)
                return True

        if not self.is_composing:
            return False

        if kind == keys.KIND_BACKSPACE:
            self._buffer.pop()
            if self._buffer:
                self._refresh()
            else:
                self._cancel()
            return True

        if kind == keys.KIND_ENTER:
            self._commit()
            return True

        if kind == keys.KIND_ESCAPE:
            self._cancel()
            return True

        if kind == keys.KIND_SPACE:
            self._append(' ')
            return True

        if kind == keys.KIND_NAVIGATION:
            logger.info("Navigation key 0x%04x: committing %r", event.keyval, self.buffer)
        self._commit()
        return False

    def focus_lost(self):
        if self.is_composing:
            logger.info("Focus lost: cancelling composition %r", self.buffer)
            self._cancel()
        else:
            self._notify(self.preview, "hide")

    def composition_terminated(self):
        """The host ended the composition itself; forget the pending input."""
        self._buffer = []
        self.composed_text = ""
        self._notify(self.preview, "hide")

    def toggle(self):
        self.set_enabled(not self.enabled)

    def set_enabled(self, enabled):
        if enabled == self.enabled:
            return
        if self.is_composing:
            self._commit()
        self.enabled = enabled
        logger.info("Input %s", "ON" if enabled else "OFF")

    def reload(self, toggle_key, user_dict):
        self.toggle_key, self.user_dict = toggle_key, user_dict
        logger.info("Reloaded toggle key %s and %d dictionary entries",
                    toggle_key.label(), len(user_dict))

    def convert(self, raw):
        text = self.user_dict.lookup(raw)
        if text is None:
            text = self.converter.convert(raw)
        return text

    def _append(self, ch):
        if not self._buffer:
            self._notify(self.host, "begin")
        self._buffer.append(ch)
        self._refresh()

    def _refresh(self):
        raw = self.buffer
        self.composed_text = self.convert(raw)
        self._notify(self.host, "update", self.composed_text)
        self._notify(self.preview, "show", self.composed_text, raw, self.anchor)

    def _commit(self):
        self._notify(self.host, "commit")
        self._finish()

    def _cancel(self):
        self._notify(self.host, "cancel")
        self._finish()

    def _finish(self):
        self._buffer = []
        self.composed_text = ""
        self._notify(self.preview, "hide")

    def _notify(self, target, method, *args):
        # The buffer is the source of truth; a failing host does not change it.
        try:
            getattr(target, method)(*args)
        except Exception:
            logger.exception("%s.%s failed", type(target).__name__, method)
