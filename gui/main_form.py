"""Tkinter main window of the days counter.

The window only moves values between widgets and DaysCounterForm; every
result is computed by the form and pushed back through its subscription.
"""

import logging
import math
import tkinter as tk
from datetime import date, datetime
from tkinter import filedialog, messagebox, ttk

from dayscounter import __version__
from dayscounter.clipboard import copy_text, paste_date
from dayscounter.config import DaysCounterConfig
from dayscounter.file_opener import open_file
from dayscounter.form import DaysCounterForm
from dayscounter.reporting import LoggingErrorReporter, install_exception_hooks
from gui.clipboard import TkClipboard

logger = logging.getLogger(__name__)

APP_TITLE = "Days Counter"


class DateField:
    """Entry bound to one date input of the form."""

    def __init__(self, window: "MainForm", parent: ttk.Frame, name: str, hint: str):
        self.window = window
        self.name = name
        self.var = tk.StringVar(value=self._format(window.form.get(name)))
        self.entry = ttk.Entry(parent, textvariable=self.var, width=14)
        window.add_hint(self.entry, hint)
        self.var.trace_add("write", lambda *_: self._changed())

    def _format(self, value: date) -> str:
        return value.strftime(self.window.settings.date_format)

    def _changed(self) -> None:
        text = self.var.get().strip()
        try:
            value = datetime.strptime(text, self.window.settings.date_format).date()
        except ValueError:
            self.window.set_status(f"'{text}' is not a date in the expected format.")
            return
        self.window.clear_status()
        self.window.form.set(self.name, value)

    def set(self, value: date) -> None:
        self.var.set(self._format(value))


class MainForm(tk.Tk):
    """Main window with one tab per calculation."""

    def __init__(self, config: DaysCounterConfig | None = None) -> None:
        super().__init__()
        self.settings = config or DaysCounterConfig()
        self.title(f"{APP_TITLE} {__version__}")
        self.minsize(420, 260)

        self.reporter = LoggingErrorReporter(notify=self._show_message)
        self.clipboard = TkClipboard(self)
        self.form = DaysCounterForm(config=self.settings, reporter=self.reporter)

        self.status_var = tk.StringVar()
        self.topmost = tk.BooleanVar(value=False)
        self.outputs: dict[str, tk.StringVar] = {
            "difference_text": tk.StringVar(value=self.form.difference_text),
            "span_result": tk.StringVar(value=self.form.span_result_text),
            "age_text": tk.StringVar(value=self.form.age_text),
            "day_of_year_text": tk.StringVar(value=self.form.day_of_year_text),
        }

        self._build()
        self.form.subscribe(self._on_output)
        self.bind("<Escape>", lambda e: self.destroy())

    # --------------------------- Layout ---------------------------- #
    def _build(self) -> None:
        menubar = tk.Menu(self)
        view_menu = tk.Menu(menubar, tearoff=False)
        view_menu.add_checkbutton(
            label="Stay on top", variable=self.topmost, command=self._apply_topmost
        )
        menubar.add_cascade(label="View", menu=view_menu)
        self.configure(menu=menubar)

        notebook = ttk.Notebook(self)
        notebook.pack(fill="both", expand=True, padx=8, pady=8)

        # Date to date
        tab = ttk.Frame(notebook, padding=10)
        notebook.add(tab, text="Date to date")
        begin = DateField(self, tab, "begin", "First date of the range.")
        end = DateField(self, tab, "end", "Last date of the range.")
        ttk.Label(tab, text="From").grid(row=0, column=0, sticky="w")
        begin.entry.grid(row=0, column=1, sticky="w", padx=4)
        ttk.Label(tab, text="To").grid(row=1, column=0, sticky="w")
        end.entry.grid(row=1, column=1, sticky="w", padx=4)
        ttk.Label(tab, textvariable=self.outputs["difference_text"]).grid(
            row=2, column=0, columnspan=2, sticky="w", pady=8
        )
        self._clipboard_buttons(tab, 3, "difference_text", begin)

        # Date plus days
        tab = ttk.Frame(notebook, padding=10)
        notebook.add(tab, text="Date plus days")
        start = DateField(self, tab, "span_start", "Date to count from.")
        ttk.Label(tab, text="Start").grid(row=0, column=0, sticky="w")
        start.entry.grid(row=0, column=1, sticky="w", padx=4)
        self.days_var = tk.StringVar(value="0")
        days = ttk.Spinbox(
            tab, from_=-100000, to=100000, textvariable=self.days_var, width=10
        )
        self.add_hint(days, "Number of days to add; negative values go back.")
        self.days_var.trace_add("write", lambda *_: self._days_changed())
        ttk.Label(tab, text="Days").grid(row=1, column=0, sticky="w")
        days.grid(row=1, column=1, sticky="w", padx=4)
        ttk.Label(tab, text="Result").grid(row=2, column=0, sticky="w", pady=8)
        ttk.Label(tab, textvariable=self.outputs["span_result"]).grid(
            row=2, column=1, sticky="w", padx=4
        )
        self._clipboard_buttons(tab, 3, "span_result", start)
        export = ttk.Button(tab, text="Export to calendar", command=self._export)
        self.add_hint(export, "Save the result date as a full-day calendar entry.")
        export.grid(row=4, column=0, columnspan=2, sticky="w", pady=8)

        # Days of life
        tab = ttk.Frame(notebook, padding=10)
        notebook.add(tab, text="Days of life")
        birth = DateField(self, tab, "birth_date", "Your date of birth.")
        ttk.Label(tab, text="Born on").grid(row=0, column=0, sticky="w")
        birth.entry.grid(row=0, column=1, sticky="w", padx=4)
        ttk.Label(tab, textvariable=self.outputs["age_text"]).grid(
            row=1, column=0, columnspan=2, sticky="w", pady=8
        )
        self._clipboard_buttons(tab, 2, "age_text", birth)

        # Day of year
        tab = ttk.Frame(notebook, padding=10)
        notebook.add(tab, text="Day of year")
        doy = DateField(self, tab, "day_of_year_date", "Date to locate within its year.")
        ttk.Label(tab, text="Date").grid(row=0, column=0, sticky="w")
        doy.entry.grid(row=0, column=1, sticky="w", padx=4)
        ttk.Label(tab, textvariable=self.outputs["day_of_year_text"]).grid(
            row=1, column=0, columnspan=2, sticky="w", pady=8
        )
        self._clipboard_buttons(tab, 2, "day_of_year_text", doy)

        status = ttk.Label(self, textvariable=self.status_var, anchor="w", relief="sunken")
        status.pack(fill="x", side="bottom")

    def _clipboard_buttons(
        self, tab: ttk.Frame, row: int, output: str, paste_target: DateField
    ) -> None:
        buttons = ttk.Frame(tab)
        buttons.grid(row=row, column=0, columnspan=2, sticky="w")
        copy = ttk.Button(
            buttons,
            text="Copy",
            command=lambda: copy_text(self.clipboard, self.outputs[output].get(), self.reporter),
        )
        paste = ttk.Button(
            buttons, text="Paste date", command=lambda: self._paste_into(paste_target)
        )
        self.add_hint(copy, "Copy the result to the clipboard.")
        self.add_hint(paste, "Paste a date from the clipboard.")
        copy.pack(side="left")
        paste.pack(side="left", padx=4)

    # --------------------------- Status bar ---------------------------- #
    def add_hint(self, widget: tk.Widget, text: str) -> None:
        widget.bind("<Enter>", lambda e: self.set_status(text), add="+")
        widget.bind("<Leave>", lambda e: self.clear_status(), add="+")

    def set_status(self, text: str) -> None:
        self.status_var.set(text)

    def clear_status(self) -> None:
        self.status_var.set("")

    # --------------------------- Handlers ---------------------------- #
    def _on_output(self, name: str, value) -> None:
        if name == "span_result":
            value = value.strftime(self.settings.date_format)
        self.outputs[name].set(value)

    def _days_changed(self) -> None:
        text = self.days_var.get().strip()
        try:
            days = float(text)
        except ValueError:
            days = math.nan
        if not math.isfinite(days):
            self.set_status(f"'{text}' is not a number of days.")
            return
        self.clear_status()
        self.form.set("span_days", int(days) if days.is_integer() else days)

    def _paste_into(self, field: DateField) -> None:
        value = paste_date(self.clipboard, self.reporter)
        if value is not None:
            field.set(value)

    def _apply_topmost(self) -> None:
        self.attributes("-topmost", self.topmost.get())

    def _export(self) -> None:
        path = filedialog.asksaveasfilename(
            parent=self,
            title="Save calendar entry",
            defaultextension=".ics",
            initialfile=self.settings.export_filename,
            filetypes=[("iCalendar file", ".ics"), ("All files", "*.*")],
        )
        if not path:
            return
        written = self.form.export_event(path)
        if written is None:
            return
        if messagebox.askyesno(
            "Export successful",
            "File successfully exported.\nDo you want to open it directly (in Outlook/Calendar)?",
            parent=self,
        ):
            open_file(written, self.reporter)

    def _show_message(self, level: str, message: str) -> None:
        if level == "error":
            messagebox.showerror("Error", message, parent=self)
        elif level == "warning":
            messagebox.showwarning("Warning", message, parent=self)
        else:
            messagebox.showinfo("Information", message, parent=self)

    def report_callback_exception(self, exc, val, tb):
        """Report errors raised inside Tk callbacks instead of printing them."""
        self.reporter.error("An invalid operation occurred. Please try again.", val)


def run(config: DaysCounterConfig | None = None) -> None:
    """Create the main window and run the Tk event loop."""
    window = MainForm(config)
    install_exception_hooks(window.reporter)
    logger.info("Application started.")
    window.mainloop()
