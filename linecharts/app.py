from __future__ import annotations

import os
import traceback
from typing import List, Optional

import matplotlib

matplotlib.use("TkAgg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
import tkinter as tk
from tkinter import filedialog, messagebox, ttk

from .config import SAMPLE_LEGEND, SAMPLE_POINTS, SAMPLE_TITLE
from .data_loader import DataLoadError, SeriesDataLoader
from .data_model import SeriesTriple
from .plotting import MultiLineView
from .styles import GradientColors, Styles
from .ui.controls import AppearancePanel


class ChartPreviewApp(tk.Tk):
    def __init__(self, data: Optional[List[SeriesTriple]] = None):
        super().__init__()
        self.title("Line Chart Preview")

        self.update_idletasks()
        screen_width = self.winfo_screenwidth()
        screen_height = self.winfo_screenheight()

        window_width = min(int(screen_width * 0.6), 1200)
        window_height = min(int(screen_height * 0.6), 720)
        position_x = (screen_width - window_width) // 2
        position_y = (screen_height - window_height) // 2
        self.geometry(f"{window_width}x{window_height}+{position_x}+{position_y}")
        self.minsize(640, 420)

        print(f"[Window Init] Window: {window_width}x{window_height}px at ({position_x}, {position_y})")

        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)

        self.data: List[SeriesTriple] = data or [(SAMPLE_POINTS, "Test", GradientColors.ORANGE)]
        self.data_loader = SeriesDataLoader()

        # === Main container with grid ===
        main_container = ttk.Frame(self)
        main_container.grid(row=0, column=0, sticky="nsew")
        main_container.rowconfigure(1, weight=1)
        main_container.columnconfigure(1, weight=1)

        # === Top controls ===
        top = ttk.Frame(main_container)
        top.grid(row=0, column=0, columnspan=2, sticky="ew", padx=6, pady=4)
        ttk.Button(top, text="Open Data File...", command=self.open_csv).pack(side=tk.LEFT)
        ttk.Button(top, text="Export PNG", command=lambda: self.export_graph("png")).pack(side=tk.LEFT, padx=4)

        self.status = tk.StringVar(value="Drag across the chart to inspect values")
        ttk.Label(top, textvariable=self.status).pack(side=tk.LEFT, padx=8)

        # === Side controls ===
        self.appearance = AppearancePanel(
            main_container,
            on_change=self.rebuild_chart,
            title=SAMPLE_TITLE,
            legend=SAMPLE_LEGEND,
        )
        self.appearance.grid(row=1, column=0, sticky="nw", padx=6, pady=4)

        # === Figure area (expands to fill space) ===
        dpi = 100
        self.fig = plt.Figure(figsize=(max(window_width / 150, 6), max(window_height / 150, 4)), dpi=dpi)
        self.canvas = FigureCanvasTkAgg(self.fig, master=main_container)
        self.canvas_widget = self.canvas.get_tk_widget()
        self.canvas_widget.grid(row=1, column=1, sticky="nsew", padx=6, pady=6)

        self.chart: Optional[MultiLineView] = None
        self.rebuild_chart()

        self.canvas_widget.bind('<Configure>', self._on_canvas_resize, add='+')

    def rebuild_chart(self) -> None:
        """Recreate the chart from the current data and appearance settings."""
        try:
            chart = MultiLineView(
                self.data,
                title=self.appearance.title,
                legend=self.appearance.legend,
                style=Styles.LINE_CHART_STYLE_ONE,
                value_specifier=self.appearance.value_specifier,
            )
        except ValueError as e:
            messagebox.showerror("Chart Error", str(e))
            return

        if self.chart is not None:
            self.chart.disconnect()
        self.chart = chart
        self.chart.render(self.fig, self.appearance.scheme)
        self.chart.connect(self.canvas)
        self.canvas.draw()
        print(f"[Chart] Rebuilt with {len(self.data)} series ({self.appearance.scheme.value} mode)")

    def _on_canvas_resize(self, event) -> None:
        if self.chart is not None:
            self.chart.redraw()

    def open_csv(self) -> None:
        """Open a CSV or tab-delimited TXT file and plot its numeric columns."""
        path = filedialog.askopenfilename(
            title="Select data file (CSV or TXT)",
            filetypes=[("Data files", "*.csv *.txt"), ("CSV files", "*.csv"), ("TXT files", "*.txt"), ("All files", "*.*")]
        )
        if not path:
            return

        try:
            result = self.data_loader.load(path)
        except DataLoadError as exc:
            messagebox.showerror("Error loading file", f"Failed to load file:\n{exc}")
            return
        except Exception as exc:
            messagebox.showerror("Error loading file", f"An error occurred while loading:\n{exc}")
            traceback.print_exc()
            return

        self.data = result.triples()
        print(f"[File Load] Columns: {', '.join(result.columns[:10])}{'...' if len(result.columns) > 10 else ''}")
        self.status.set(f"Loaded: {os.path.basename(path)} ({len(result.series)} series)")
        self.rebuild_chart()

    def export_graph(self, fmt: str) -> None:
        filetypes = [(f"{fmt.upper()} files", f"*.{fmt}"), ("All files", "*.*")]
        path = filedialog.asksaveasfilename(defaultextension=f".{fmt}", filetypes=filetypes)
        if not path:
            return
        try:
            self.fig.savefig(path, format=fmt, facecolor=self.fig.get_facecolor())
            messagebox.showinfo("Export successful", f"Graph exported as {os.path.basename(path)}")
        except Exception as e:
            messagebox.showerror("Export error", str(e))


def main() -> None:
    app = ChartPreviewApp()
    app.mainloop()


if __name__ == "__main__":
    main()
