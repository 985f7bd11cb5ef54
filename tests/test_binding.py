"""
Unit Tests for WPF-Style Data Binding System.

Tests for:
- BindableProperty descriptor
- bind() function
- bind_command() function
"""
import pytest
from unittest.mock import MagicMock
from PySide6.QtCore import QObject, Signal
from PySide6.QtWidgets import QLabel, QLineEdit, QPushButton

from photofeed.ui.mvvm.bindable import BindableProperty, BindableBase
from photofeed.ui.mvvm.binding import bind, bind_command, BindingMode


# =============================================================================
# BindableProperty Tests
# =============================================================================

class TestBindableProperty:
    """Tests for BindableProperty descriptor."""

    def test_default_value(self, qapp):
        class TestVM(BindableBase):
            term = BindableProperty(default="cats")

        assert TestVM().term == "cats"

    def test_defaults_are_per_instance(self, qapp):
        class TestVM(BindableBase):
            term = BindableProperty(default="")

        a, b = TestVM(), TestVM()
        a.term = "cats"
        assert b.term == ""

    def test_emits_property_changed(self, qapp):
        class TestVM(BindableBase):
            count = BindableProperty(default=0)

        vm = TestVM()
        callback = MagicMock()
        vm.propertyChanged.connect(callback)

        vm.count = 42

        callback.assert_called_once_with("count", 42)

    def test_emits_specific_signal(self, qapp):
        class TestVM(BindableBase):
            busyChanged = Signal(bool)
            busy = BindableProperty(default=False)

        vm = TestVM()
        callback = MagicMock()
        vm.busyChanged.connect(callback)

        vm.busy = True

        callback.assert_called_once_with(True)

    def test_no_emit_on_same_value(self, qapp):
        class TestVM(BindableBase):
            term = BindableProperty(default="same")

        vm = TestVM()
        callback = MagicMock()
        vm.propertyChanged.connect(callback)

        vm.term = "same"

        callback.assert_not_called()

    def test_coerce_function(self, qapp):
        class TestVM(BindableBase):
            term = BindableProperty(default="", coerce=lambda v: v or "")

        vm = TestVM()
        vm.term = None
        assert vm.term == ""

    def test_class_access_returns_descriptor(self, qapp):
        class TestVM(BindableBase):
            term = BindableProperty(default="")

        assert isinstance(TestVM.term, BindableProperty)
        assert TestVM.term.name == "term"
        assert TestVM.term.signal_name == "termChanged"


# =============================================================================
# bind() Function Tests
# =============================================================================

class TextVM(BindableBase):
    textChanged = Signal(str)
    text = BindableProperty(default="")


class TestBindFunction:
    """Tests for bind() helper function."""

    def test_one_way_binding(self, qapp):
        vm = TextVM()
        label = QLabel()

        bind(vm, "text", label, "text", mode=BindingMode.ONE_WAY)

        vm.text = "Hello"
        assert label.text() == "Hello"

    def test_initial_sync(self, qapp):
        vm = TextVM()
        vm.text = "Initial"
        label = QLabel()

        bind(vm, "text", label, "text")

        assert label.text() == "Initial"

    def test_two_way_binding(self, qapp):
        vm = TextVM()
        line_edit = QLineEdit()

        bind(vm, "text", line_edit, "text", mode=BindingMode.TWO_WAY)

        vm.text = "From VM"
        assert line_edit.text() == "From VM"

        line_edit.setText("From Widget")
        assert vm.text == "From Widget"

    def test_one_time_binding(self, qapp):
        vm = TextVM()
        vm.text = "Initial"
        label = QLabel()

        bind(vm, "text", label, "text", mode=BindingMode.ONE_TIME)
        vm.text = "Updated"

        assert label.text() == "Initial"

    def test_one_way_to_source(self, qapp):
        vm = TextVM()
        line_edit = QLineEdit()

        bind(vm, "text", line_edit, "text", mode=BindingMode.ONE_WAY_TO_SOURCE)

        line_edit.setText("typed")
        assert vm.text == "typed"

        vm.text = "ignored by widget"
        assert line_edit.text() == "typed"

    def test_converter(self, qapp):
        class CountVM(BindableBase):
            countChanged = Signal(int)
            count = BindableProperty(default=0)

        vm = CountVM()
        label = QLabel()

        bind(vm, "count", label, "text", converter=lambda x: f"{x} photos")

        vm.count = 42
        assert label.text() == "42 photos"

    def test_visible_binding(self, qapp):
        class BusyVM(BindableBase):
            busyChanged = Signal(bool)
            busy = BindableProperty(default=False)

        vm = BusyVM()
        label = QLabel("...")

        bind(vm, "busy", label, "visible")
        assert label.isHidden()

        vm.busy = True
        assert not label.isHidden()

    def test_enabled_binding_with_converter(self, qapp):
        class BusyVM(BindableBase):
            busyChanged = Signal(bool)
            busy = BindableProperty(default=False)

        vm = BusyVM()
        button = QPushButton()

        bind(vm, "busy", button, "enabled", converter=lambda busy: not busy)
        assert button.isEnabled()

        vm.busy = True
        assert not button.isEnabled()

    def test_fallback_to_python_property(self, qapp):
        class Target(QObject):
            def __init__(self):
                super().__init__()
                self.items = None

        vm = TextVM()
        target = Target()

        bind(vm, "text", target, "items")
        vm.text = "cats"

        assert target.items == "cats"

    def test_two_way_without_change_signal_raises(self, qapp):
        vm = TextVM()

        with pytest.raises(ValueError):
            bind(vm, "text", QLabel(), "text", mode=BindingMode.TWO_WAY)


class TestBindCommand:
    """Tests for bind_command() function."""

    def test_bind_command(self, qapp):
        class TestVM(BindableBase):
            def __init__(self):
                super().__init__()
                self.refreshed = 0

            def refresh(self):
                self.refreshed += 1

        vm = TestVM()
        button = QPushButton()
        bind_command(vm, "refresh", button)

        button.click()

        assert vm.refreshed == 1

    def test_missing_command_raises(self, qapp):
        with pytest.raises(ValueError):
            bind_command(TextVM(), "nope", QPushButton())

    def test_missing_signal_raises(self, qapp):
        class TestVM(BindableBase):
            def refresh(self):
                pass

        with pytest.raises(ValueError):
            bind_command(TestVM(), "refresh", QPushButton(), "nope")
