# app.py
# CustomTkinter GUI for the word frequency counter (dark theme).
# - Choose a UTF-8 text file; counting runs in a background thread.
# - Ranked words in the results pane; events in the log pane.
# - Save the exact report (same bytes the CLI writes) to a file.

from __future__ import annotations
import threading
from typing import Optional

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

from freqs.engine import Engine, FrequencyReport
from freqs.loader import read_file, open_output
from freqs.errors import FreqsError


# -------------------- small helpers --------------------

def shorten_path(p: str, max_chars: int = 60) -> str:
    """Shorten long paths neatly for labels."""
    if len(p) <= max_chars:
        return p
    keep = max_chars // 2 - 3
    return p[:keep] + "..." + p[-keep:]


def format_rows(report: FrequencyReport, limit: int = 2000) -> str:
    rows = report.entries(limit=limit)
    lines = [f"{i:>5}  {count:>8}  {word}" for i, (count, word) in enumerate(rows, start=1)]
    if report.distinct > limit:
        lines.append(f"... {report.distinct - limit:,} more")
    return "\n".join(lines)


# -------------------- main app --------------------

class FreqsApp(ctk.CTk):
    """Dark-themed GUI that counts words in a chosen file and shows the ranking."""

    def __init__(self) -> None:
        super().__init__()

        # Theme
        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        # Window
        self.title("Word Frequencies")
        self.geometry("900x650")
        self.minsize(820, 560)

        # State
        self._engine = Engine()
        self._report: Optional[FrequencyReport] = None
        self._worker: Optional[threading.Thread] = None

        # Fonts
        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_label = ctk.CTkFont(size=13)
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=13)

        # Layout grid
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(2, weight=1)  # results
        self.grid_rowconfigure(3, weight=1)  # log

        # Build UI
        self._build_header()
        self._build_source_bar()
        self._build_results()
        self._build_log()

        self._set_status("Ready")

    # --------- UI sections ---------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        ctk.CTkLabel(header, text="Word Frequencies", font=self.font_title).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )

    def _build_source_bar(self) -> None:
        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        bar.grid_columnconfigure(2, weight=1)

        ctk.CTkButton(bar, text="Choose File", command=self._choose_file).grid(
            row=0, column=0, padx=(12, 6), pady=10
        )
        self.btn_save = ctk.CTkButton(bar, text="Save Report", command=self._save_report, state="disabled")
        self.btn_save.grid(row=0, column=1, padx=(0, 6), pady=10)

        self.lbl_source = ctk.CTkLabel(bar, text="No file selected", anchor="w", font=self.font_label)
        self.lbl_source.grid(row=0, column=2, sticky="ew", padx=6, pady=10)

        self.progress = ctk.CTkProgressBar(bar, mode="indeterminate")
        self.progress.grid(row=0, column=3, sticky="e", padx=(0, 6), pady=10)

        self.lbl_status = ctk.CTkLabel(bar, text="Status: —", anchor="e")
        self.lbl_status.grid(row=0, column=4, sticky="e", padx=12, pady=10)

    def _build_results(self) -> None:
        self.txt_results = ctk.CTkTextbox(self, wrap="none", font=self.font_mono)
        self.txt_results.grid(row=2, column=0, sticky="nsew", padx=12, pady=6)
        self._set_results("(choose a file to count its words)")

    def _build_log(self) -> None:
        self.txt_log = ctk.CTkTextbox(self, height=110, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=3, column=0, sticky="nsew", padx=12, pady=(6, 12))
        self._log("GUI ready.")

    # --------- counting (threaded) ---------

    def _choose_file(self) -> None:
        path = fd.askopenfilename(title="Choose text file", filetypes=[("Text", "*.txt"), ("All files", "*.*")])
        if not path:
            return
        if self._worker and self._worker.is_alive():
            mb.showinfo("Counting", "A file is already being counted. Please wait.")
            return

        self.lbl_source.configure(text=shorten_path(path))
        self._set_status("Counting…")
        self.btn_save.configure(state="disabled")
        self.progress.start()

        self._worker = threading.Thread(target=self._count_worker, args=(path,), daemon=True)
        self._worker.start()

    def _count_worker(self, path: str) -> None:
        try:
            report = self._engine.count(read_file(path))
        except FreqsError as exc:
            self.after(0, lambda e=exc: self._on_error(e))
            return
        self.after(0, lambda: self._on_done(report))

    def _on_done(self, report: FrequencyReport) -> None:
        self.progress.stop()
        self._report = report
        self._set_status(f"{report.occurrences:,} words, {report.distinct:,} distinct")
        self._set_results(format_rows(report) or "(no words)")
        self.btn_save.configure(state="normal")
        self._log(f"Counted {report.occurrences} words ({report.distinct} distinct).")

    def _on_error(self, exc: FreqsError) -> None:
        self.progress.stop()
        self._set_status("Error")
        self._log(f"ERROR: {exc}")
        mb.showerror("Count failed", str(exc))

    def _save_report(self) -> None:
        if self._report is None:
            return
        path = fd.asksaveasfilename(title="Save report", defaultextension=".txt")
        if not path:
            return
        try:
            with open_output(path) as f:
                f.write(self._report.to_bytes())
        except (FreqsError, OSError) as exc:
            self._log(f"ERROR: {exc}")
            mb.showerror("Save failed", str(exc))
            return
        self._log(f"Report saved to {path}")

    # --------- misc UI helpers ---------

    def _set_status(self, text: str) -> None:
        self.lbl_status.configure(text=f"Status: {text}")

    def _set_results(self, text: str) -> None:
        self.txt_results.configure(state="normal")
        self.txt_results.delete("0.0", "end")
        if text:
            self.txt_results.insert("end", text)
        self.txt_results.configure(state="disabled")

    def _log(self, msg: str) -> None:
        self.txt_log.insert("end", msg + "\n")
        self.txt_log.see("end")


if __name__ == "__main__":
    app = FreqsApp()
    app.mainloop()
