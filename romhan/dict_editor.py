#!/usr/bin/env python3
"""
Romhan User Dictionary Editor
Edits the JSON user dictionary: romanized keys and their replacements.
"""
import gi
import logging
import signal

gi.require_version("Gtk", "3.0")
from gi.repository import Gtk, Gdk, GLib

from romhan.config import USER_DICT_FILE, load_config
from romhan.user_dict import read_entries, write_entries

logger = logging.getLogger(__name__)

COL_KEY, COL_VALUE = range(2)


def collect_entries(rows):
    """Entries from (key, value) rows; blank rows are skipped, later keys win."""
    entries = {}
    for key, value in rows:
        key = key.strip().lower()
        if key and value:
            entries[key] = value
    return entries


class DictEditorWindow(Gtk.Window):
    def __init__(self, path):
        super().__init__(title="Romhan User Dictionary")
        self.set_default_size(560, 460)
        self.set_border_width(8)
        self.path = path

        self.store = Gtk.ListStore(str, str)
        self.store.set_sort_column_id(COL_KEY, Gtk.SortType.ASCENDING)

        layout = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=8)
        layout.pack_start(self.build_header(), False, False, 0)
        layout.pack_start(self.build_list(), True, True, 0)
        layout.pack_start(self.build_buttons(), False, False, 0)
        self.add(layout)

        self.connect("key-press-event", self.on_key_press)
        self.load_dictionary()

    def build_header(self):
        header = Gtk.Label(xalign=0)
        header.set_markup(
            "<b>User dictionary</b>\n"
            "An entry replaces the whole romanized input when it matches exactly.\n"
            f"<small>{GLib.markup_escape_text(self.path)}</small>"
        )
        return header

    def build_list(self):
        self.tree = Gtk.TreeView(model=self.store)
        self.tree.set_grid_lines(Gtk.TreeViewGridLines.HORIZONTAL)
        self.tree.append_column(self.make_column("Romanized", COL_KEY, expand=False))
        self.tree.append_column(self.make_column("Replacement", COL_VALUE, expand=True))

        scroll = Gtk.ScrolledWindow()
        scroll.set_policy(Gtk.PolicyType.NEVER, Gtk.PolicyType.AUTOMATIC)
        scroll.add(self.tree)
        return scroll

    def make_column(self, title, column, expand):
        renderer = Gtk.CellRendererText(editable=True)
        renderer.connect("edited", self.on_cell_edited, column)
        col = Gtk.TreeViewColumn(title, renderer, text=column)
        col.set_sort_column_id(column)
        col.set_resizable(True)
        col.set_min_width(140)
        col.set_expand(expand)
        return col

    def build_buttons(self):
        bar = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=6)
        for label, handler, at_end in [
            ("Add", self.on_add, False),
            ("Remove", self.on_remove, False),
            ("Close", lambda w: self.destroy(), True),
            ("Save", self.on_save, True),
        ]:
            button = Gtk.Button(label=label)
            button.connect("clicked", handler)
            if at_end:
                bar.pack_end(button, False, False, 0)
            else:
                bar.pack_start(button, False, False, 0)
        return bar

    def load_dictionary(self):
        self.store.clear()
        try:
            entries = read_entries(self.path)
        except FileNotFoundError:
            return
        except (OSError, ValueError, RecursionError) as e:
            logger.warning("Could not read %s: %s", self.path, e)
            self.report(Gtk.MessageType.WARNING, "Dictionary could not be read", str(e))
            return
        for key, value in entries.items():
            self.store.append([key, value])

    def on_cell_edited(self, renderer, path, new_text, column):
        if column == COL_KEY:
            new_text = new_text.strip().lower()
        self.store[path][column] = new_text

    def on_add(self, widget):
        # Unsorted while the new row is edited so it stays at the bottom.
        self.store.set_sort_column_id(Gtk.TREE_SORTABLE_UNSORTED_SORT_COLUMN_ID,
                                      Gtk.SortType.ASCENDING)
        it = self.store.append(["", ""])
        self.tree.set_cursor(self.store.get_path(it), self.tree.get_column(COL_KEY), True)

    def on_remove(self, widget):
        model, it = self.tree.get_selection().get_selected()
        if it is not None:
            model.remove(it)

    def on_key_press(self, widget, event):
        if event.keyval == Gdk.KEY_Delete and self.tree.is_focus():
            self.on_remove(widget)
            return True
        return False

    def on_save(self, widget):
        entries = collect_entries((row[COL_KEY], row[COL_VALUE]) for row in self.store)
        try:
            write_entries(self.path, entries)
        except OSError as e:
            logger.error("Could not save %s: %s", self.path, e)
            self.report(Gtk.MessageType.ERROR, "Dictionary was not saved", str(e))
            return
        logger.info("Saved %d entries to %s", len(entries), self.path)
        self.report(Gtk.MessageType.INFO, f"Saved {len(entries)} entries",
                    "Choose 'Reload settings' from the input menu to use them.")
        self.load_dictionary()

    def report(self, message_type, text, detail):
        dialog = Gtk.MessageDialog(
            transient_for=self,
            message_type=message_type,
            buttons=Gtk.ButtonsType.OK,
            text=text,
        )
        dialog.format_secondary_text(detail)
        dialog.run()
        dialog.destroy()


def main():
    path = load_config().user_dict_file() or USER_DICT_FILE
    win = DictEditorWindow(path)
    win.connect("destroy", Gtk.main_quit)
    win.show_all()

    signal.signal(signal.SIGINT, signal.SIG_DFL)
    Gtk.main()


if __name__ == "__main__":
    main()
