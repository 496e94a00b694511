"""Appearance control panel.

Contains controls for the colour scheme, chart title, legend caption and
value format.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from ...config import DEFAULT_VALUE_SPECIFIER
from ...styles import ColorScheme


class AppearancePanel:
    """Panel for chart appearance options."""
    
    def __init__(
        self,
        parent: ttk.Frame,
        on_change: Callable[[], None],
        title: str = "",
        legend: str = "",
        label_entry_width: int = 20,
    ):
        """Initialize the appearance panel.
        
        Args:
            parent: Parent frame to place this panel in
            on_change: Called when the user applies new settings
            title: Initial chart title
            legend: Initial legend caption
            label_entry_width: Width of entry fields
        """
        self.on_change = on_change
        self.frame = ttk.LabelFrame(parent, text="Appearance")
        
        # Dark mode checkbox
        self.dark_mode_var = tk.BooleanVar(value=False)
        ttk.Checkbutton(
            self.frame, text="Dark mode",
            variable=self.dark_mode_var,
            command=self.on_change,
        ).grid(row=0, column=0, columnspan=2, sticky="w", padx=4, pady=2)
        
        # Title
        ttk.Label(self.frame, text="Title:").grid(row=1, column=0, sticky="w", padx=4, pady=2)
        self.title_entry = ttk.Entry(self.frame, width=label_entry_width)
        self.title_entry.insert(0, title)
        self.title_entry.grid(row=1, column=1, sticky="w", padx=4, pady=2)
        
        # Legend caption
        ttk.Label(self.frame, text="Legend:").grid(row=2, column=0, sticky="w", padx=4, pady=2)
        self.legend_entry = ttk.Entry(self.frame, width=label_entry_width)
        self.legend_entry.insert(0, legend)
        self.legend_entry.grid(row=2, column=1, sticky="w", padx=4, pady=2)
        
        # Value format
        ttk.Label(self.frame, text="Value format:").grid(row=3, column=0, sticky="w", padx=4, pady=2)
        self.value_format_entry = ttk.Entry(self.frame, width=8)
        self.value_format_entry.insert(0, DEFAULT_VALUE_SPECIFIER)
        self.value_format_entry.grid(row=3, column=1, sticky="w", padx=4, pady=2)
        
        ttk.Button(self.frame, text="Apply", command=self.on_change).grid(
            row=4, column=0, columnspan=2, sticky="e", padx=4, pady=4
        )
    
    @property
    def scheme(self) -> ColorScheme:
        return ColorScheme.DARK if self.dark_mode_var.get() else ColorScheme.LIGHT
    
    @property
    def title(self) -> Optional[str]:
        """Title text, or None when the entry is blank."""
        return self.title_entry.get().strip() or None
    
    @property
    def legend(self) -> Optional[str]:
        return self.legend_entry.get().strip() or None
    
    @property
    def value_specifier(self) -> str:
        return self.value_format_entry.get().strip() or DEFAULT_VALUE_SPECIFIER
    
    def pack(self, **kwargs) -> None:
        """Pack the frame with given options."""
        self.frame.pack(**kwargs)
    
    def grid(self, **kwargs) -> None:
        """Grid the frame with given options."""
        self.frame.grid(**kwargs)
