import logging
import threading
import webbrowser

import customtkinter as ctk

from release_viewer.cli import parse_args, requested_sort
from release_viewer.config import ConfigManager
from release_viewer.exceptions import ReleaseLoadError
from release_viewer.integrations.release_source import load_releases
from release_viewer.pipeline import ReleaseSession
from release_viewer.sorting import SORT_LABELS, SortKey
from release_viewer.ui.formatting import (
    EMPTY_VIEW_MESSAGE,
    LOAD_FAILED_MESSAGE,
    LOAD_FAILED_ROW_MESSAGE,
    LOADING_MESSAGE,
    date_text,
    loaded_status_text,
    release_labels,
    status_text,
)
from release_viewer.ui.helpers import bind_mousewheel_to_frame

logger = logging.getLogger(__name__)

LABEL_TO_SORT = {label: key for key, label in SORT_LABELS.items()}


class ReleaseViewer:
    def __init__(self, root=None, config_manager=None, source=None, sort=None):
        self.config_manager = config_manager or ConfigManager()

        ctk.set_appearance_mode(self.config_manager.get("appearance_mode"))
        ctk.set_default_color_theme(self.config_manager.get("color_theme"))

        # Create the main window if not provided
        if root is None:
            self.root = ctk.CTk()
            self.root.title("Release Viewer")
            self.root.geometry(self.config_manager.get("window_geometry"))
        else:
            self.root = root

        self.root.protocol("WM_DELETE_WINDOW", self.on_window_close)

        self.source = source or self.config_manager.get("source")
        self.requested_sort = sort or self.config_manager.initial_sort()
        self.session = ReleaseSession()

        self.create_gui()

    def create_gui(self):
        # Toolbar with filter and sort controls
        toolbar = ctk.CTkFrame(self.root)
        toolbar.pack(fill="x", padx=20, pady=(20, 10))

        self.filter_entry = ctk.CTkEntry(toolbar, placeholder_text="Filter releases…", width=360)
        self.filter_entry.pack(side="left", padx=10, pady=10)
        self.filter_entry.bind("<KeyRelease>", lambda event: self.on_filter_changed())

        self.sort_var = ctk.StringVar(value=SORT_LABELS[self.session.sort_key])
        self.sort_menu = ctk.CTkOptionMenu(
            toolbar,
            variable=self.sort_var,
            values=[SORT_LABELS[key] for key in SortKey],
            command=self.on_sort_changed,
            width=220
        )
        self.sort_menu.pack(side="right", padx=10, pady=10)

        sort_label = ctk.CTkLabel(toolbar, text="Sort by:")
        sort_label.pack(side="right")

        self.status_label = ctk.CTkLabel(self.root, text="", anchor="w", text_color=("gray40", "gray70"))
        self.status_label.pack(fill="x", padx=30)

        # Release list
        self.list_frame = ctk.CTkScrollableFrame(self.root)
        self.list_frame.pack(fill="both", expand=True, padx=20, pady=(5, 20))
        bind_mousewheel_to_frame(self.list_frame)

    def load(self):
        """Load the dataset in the background and show it when done"""
        self.status_label.configure(text=LOADING_MESSAGE)
        timeout = self.config_manager.get("request_timeout")

        def worker():
            try:
                releases = load_releases(self.source, timeout=timeout)
            except ReleaseLoadError as e:
                self.root.after(0, lambda error=e: self.on_load_failed(error))
                return
            self.root.after(0, lambda: self.on_loaded(releases))

        threading.Thread(target=worker, daemon=True).start()

    def on_loaded(self, releases):
        state = self.session.load_dataset(releases, self.requested_sort)
        self.sort_var.set(SORT_LABELS[state.sort_key])
        self.render()
        self.status_label.configure(text=loaded_status_text(len(state.view)), text_color=("gray40", "gray70"))

    def on_load_failed(self, error):
        logger.error(f"Release load failed: {error}")
        self.status_label.configure(text=LOAD_FAILED_MESSAGE, text_color="red")
        self._clear_list()
        ctk.CTkLabel(self.list_frame, text=LOAD_FAILED_ROW_MESSAGE).pack(pady=20)

    def on_filter_changed(self):
        self.session.set_query(self.filter_entry.get())
        self.render()

    def on_sort_changed(self, label):
        sort_key = LABEL_TO_SORT.get(label)
        state = self.session.select_sort(sort_key)
        if self.sort_var.get() != SORT_LABELS[state.sort_key]:
            self.sort_var.set(SORT_LABELS[state.sort_key])
        self.render()

    def _clear_list(self):
        for child in self.list_frame.winfo_children():
            child.destroy()

    def render(self):
        """Redraw the release list from the session's current view"""
        self._clear_list()
        view = self.session.get_view()

        if not view:
            ctk.CTkLabel(self.list_frame, text=EMPTY_VIEW_MESSAGE).pack(pady=20)

        for release in view:
            self._create_release_row(release)

        self.status_label.configure(text=status_text(len(view)))

    def _create_release_row(self, release):
        row = ctk.CTkFrame(self.list_frame)
        row.pack(fill="x", padx=5, pady=4)
        row.grid_columnconfigure(2, weight=1)

        header = release.version
        labels = release_labels(release)
        if labels:
            header += "   " + "  ".join(f"[{label}]" for label in labels)
        ctk.CTkLabel(row, text=header, font=("Arial", 13, "bold"), anchor="w").grid(
            row=0, column=0, padx=10, pady=(8, 2), sticky="w"
        )
        ctk.CTkLabel(row, text=date_text(release), text_color=("gray40", "gray70")).grid(
            row=0, column=1, padx=10, pady=(8, 2), sticky="w"
        )

        if release.changes:
            changes = "\n".join(f"• {change}" for change in release.changes)
            ctk.CTkLabel(row, text=changes, justify="left", anchor="w", wraplength=620).grid(
                row=1, column=0, columnspan=3, padx=20, pady=(0, 6), sticky="w"
            )

        if release.links:
            links_frame = ctk.CTkFrame(row, fg_color="transparent")
            links_frame.grid(row=0, column=2, padx=10, pady=(8, 2), sticky="e")
            for link in release.links:
                ctk.CTkButton(
                    links_frame,
                    text=link.label,
                    width=60,
                    height=24,
                    fg_color="transparent",
                    text_color=("#3a7ebf", "#2b5f8f"),
                    hover_color=("gray85", "gray25"),
                    command=lambda url=link.url: webbrowser.open(url)
                ).pack(side="left", padx=2)

    def on_window_close(self):
        self.config_manager.set("window_geometry", self.root.geometry().split("+")[0])
        self.config_manager.save_config()
        self.root.destroy()

    def run(self):
        self.load()
        self.root.mainloop()


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s: %(message)s'
    )

    app = ReleaseViewer(
        config_manager=ConfigManager(args.config),
        source=args.source,
        sort=requested_sort(args.sort)
    )
    app.run()


if __name__ == "__main__":
    main()
