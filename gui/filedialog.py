from gi.repository import Gio, GLib, Gtk


def make_filter(name, *patterns):
    """Builds a GTK file-filter conveniently."""
    f = Gtk.FileFilter()
    f.set_name(name)
    for pattern in patterns:
        f.add_pattern(pattern)
    return f


dialog_error_quark = GLib.quark_to_string(Gtk.DialogError.quark())


def choose_words_file(parent, on_chosen):
    """Asks for a WORDS.TOK file. 'on_chosen' is called later with
    the path, or with None if the user dismissed the dialog."""
    dlg = Gtk.FileDialog(title="Vocabulary")
    filters = Gio.ListStore()
    filters.append(make_filter("Vocabulary Files", "*.tok", "*.TOK"))
    filters.append(make_filter("All Files", "*"))
    dlg.set_filters(filters)

    def on_ready(dlg, result):
        try:
            file = dlg.open_finish(result)
        except GLib.GError as err:
            if (
                err.domain == dialog_error_quark
                and err.code == Gtk.DialogError.DISMISSED
            ):
                file = None
            else:
                raise

        on_chosen(file.get_path() if file else None)

    dlg.open(parent, None, on_ready)
