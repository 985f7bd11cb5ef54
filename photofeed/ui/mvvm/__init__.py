"""
MVVM Package - WPF-Style Data Binding for PySide6.

Provides:
- BindableProperty: Descriptor for auto-signaling properties.
- BindableBase / BaseViewModel: ViewModel bases with a generic propertyChanged signal.
- bind() / bind_command(): Declarative binding between ViewModel and View.
- Debouncer: Restartable single-shot timer for settling fast-changing input.
"""
from photofeed.ui.mvvm.bindable import BindableProperty, BindableBase
from photofeed.ui.mvvm.viewmodel import BaseViewModel
from photofeed.ui.mvvm.binding import bind, bind_command, BindingMode
from photofeed.ui.mvvm.debounce import Debouncer

__all__ = [
    # ViewModels
    "BaseViewModel",
    "BindableBase",
    "BindableProperty",

    # Binding
    "bind",
    "bind_command",
    "BindingMode",

    # Timing
    "Debouncer",
]
