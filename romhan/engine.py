import logging
import os
import subprocess
import sys

import gi
gi.require_version('IBus', '1.0')
from gi.repository import IBus, GLib

from romhan.composer import Composer, CompositionHost, PreviewDisplay
from romhan.config import CONFIG_DIR, LOG_FILE, load_config, load_user_dict
from romhan.keys import KeyEvent

logger = logging.getLogger(__name__)

BUS_NAME = "org.freedesktop.IBus.Romhan"

PROP_INPUT_MODE = "InputMode"
PROP_RELOAD = "Reload"
PROP_SETTINGS = "Settings"
PROP_DICTIONARY = "Dictionary"

MODE_SYMBOLS = {True: "한", False: "A"}


def event_from_state(keyval, state):
    return KeyEvent(
        keyval,
        shift=bool(state & IBus.ModifierType.SHIFT_MASK),
        ctrl=bool(state & IBus.ModifierType.CONTROL_MASK),
        alt=bool(state & IBus.ModifierType.MOD1_MASK),
    )


class IBusCompositionHost(CompositionHost):
    """Shows the composition as preedit text of an IBus engine."""

    def __init__(self, engine):
        self.engine = engine
        self.text = ""

    def begin(self):
        self.text = ""

    def update(self, text):
        self.text = text
        ibus_text = IBus.Text.new_from_string(text)
        ibus_text.set_attributes(IBus.AttrList())
        ibus_text.append_attribute(IBus.AttrType.UNDERLINE, IBus.AttrUnderline.SINGLE, 0, len(text))
        self.engine.update_preedit_text(ibus_text, len(text), True)

    def commit(self):
        text, self.text = self.text, ""
        self.engine.hide_preedit_text()
        if text:
            self.engine.commit_text(IBus.Text.new_from_string(text))

    def cancel(self):
        self.text = ""
        self.engine.hide_preedit_text()


class IBusPreviewDisplay(PreviewDisplay):
    """Shows the converted text and the raw input on the auxiliary line."""

    def __init__(self, engine):
        self.engine = engine

    def show(self, composed, raw, anchor):
        # The panel positions the auxiliary text itself; anchor is unused.
        text = IBus.Text.new_from_string(f"{composed}  ({raw})")
        self.engine.update_auxiliary_text(text, True)

    def hide(self):
        self.engine.hide_auxiliary_text()


class RomhanEngine(IBus.Engine):
    def __init__(self):
        super().__init__()
        self.config = load_config()
        self.composer = Composer(
            IBusCompositionHost(self),
            IBusPreviewDisplay(self),
            user_dict=load_user_dict(self.config),
            toggle_key=self.config.toggle_key,
        )
        self.prop_list = self.build_properties()

    def build_properties(self):
        prop_list = IBus.PropList()
        self.mode_prop = IBus.Property(
            key=PROP_INPUT_MODE,
            prop_type=IBus.PropType.NORMAL,
            label=IBus.Text.new_from_string("Input mode"),
            symbol=IBus.Text.new_from_string(MODE_SYMBOLS[self.composer.enabled]),
            tooltip=IBus.Text.new_from_string("Switch between Hangul and Latin input"),
            sensitive=True,
            visible=True,
        )
        prop_list.append(self.mode_prop)
        for key, label in [
            (PROP_RELOAD, "Reload settings"),
            (PROP_SETTINGS, "Settings..."),
            (PROP_DICTIONARY, "Edit user dictionary..."),
        ]:
            prop_list.append(IBus.Property(
                key=key,
                prop_type=IBus.PropType.NORMAL,
                label=IBus.Text.new_from_string(label),
                sensitive=True,
                visible=True,
            ))
        return prop_list

    def do_process_key_event(self, keyval, keycode, state):
        # Ignore key releases
        if state & IBus.ModifierType.RELEASE_MASK:
            return False

        was_enabled = self.composer.enabled
        consumed = self.composer.process_key(event_from_state(keyval, state))
        if self.composer.enabled != was_enabled:
            self.update_mode_property()
        return consumed

    def update_mode_property(self):
        self.mode_prop.set_symbol(IBus.Text.new_from_string(MODE_SYMBOLS[self.composer.enabled]))
        self.update_property(self.mode_prop)

    def reload_config(self):
        logger.info("Reloading configuration and user dictionary")
        config = load_config()
        user_dict = load_user_dict(config)
        self.config = config
        self.composer.reload(config.toggle_key, user_dict)

    def do_property_activate(self, prop_name, state):
        if prop_name == PROP_INPUT_MODE:
            self.composer.toggle()
            self.update_mode_property()
        elif prop_name == PROP_RELOAD:
            self.reload_config()
        elif prop_name == PROP_SETTINGS:
            launch_tool("romhan.settings")
        elif prop_name == PROP_DICTIONARY:
            launch_tool("romhan.dict_editor")

    def do_set_cursor_location(self, x, y, w, h):
        self.composer.anchor = (x, y + h)

    def do_focus_in(self):
        self.register_properties(self.prop_list)

    def do_focus_out(self):
        self.composer.focus_lost()

    def do_reset(self):
        self.composer.composition_terminated()
        self.hide_preedit_text()

    def do_disable(self):
        self.composer.focus_lost()


def launch_tool(module):
    try:
        subprocess.Popen([sys.executable, "-m", module])
    except OSError:
        logger.exception("Could not start %s", module)


def setup_logging():
    if not os.path.exists(CONFIG_DIR):
        os.makedirs(CONFIG_DIR)
    logging.basicConfig(
        filename=LOG_FILE,
        level=logging.INFO,
        format="[%(asctime)s %(levelname)-5s] %(name)s: %(message)s",
    )


def main():
    setup_logging()
    IBus.init()
    bus = IBus.Bus()
    if not bus.is_connected():
        logger.error("Cannot connect to the IBus daemon")
        sys.exit(1)

    main_loop = GLib.MainLoop()
    bus.connect("disconnected", lambda bus: main_loop.quit())
    bus.request_name(BUS_NAME, 0)

    factory = IBus.Factory.new(bus.get_connection())
    for name in load_config().engine_names():
        factory.add_engine(name, RomhanEngine)
        logger.info("Registered engine %s", name)

    main_loop.run()


if __name__ == "__main__":
    main()
