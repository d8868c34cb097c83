# test_style.py

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from colorparse import Attribute, Indexed, Named, NamedColor, Rgb, StyleDescriptor


class TestColors:
    """Color value types."""

    @pytest.mark.parametrize("value", [-1, 256, 1.5, True])
    def test_indexed_range(self, value):
        with pytest.raises(ValueError):
            Indexed(value)

    def test_rgb_range(self):
        with pytest.raises(ValueError):
            Rgb(0, 256, 0)

    def test_rgb_hex(self):
        assert Rgb(0, 0, 238).hex == "#0000ee"

    def test_brighten(self):
        assert NamedColor.RED.brighten() is NamedColor.BRIGHT_RED
        assert NamedColor.BRIGHT_RED.is_bright
        with pytest.raises(ValueError):
            NamedColor.BRIGHT_RED.brighten()
        with pytest.raises(ValueError):
            NamedColor.DEFAULT.brighten()

    @pytest.mark.parametrize("value", ["red", None, 1])
    def test_named_requires_named_color(self, value):
        with pytest.raises(ValueError):
            Named(value)

    def test_colors_are_immutable(self):
        color = Named(NamedColor.RED)
        with pytest.raises(AttributeError):
            color.color = NamedColor.BLUE


class TestStyleDescriptor:
    """The parse result value."""

    def test_defaults(self):
        descriptor = StyleDescriptor()
        assert descriptor.foreground is None
        assert descriptor.background is None
        assert descriptor.attributes == frozenset()
        assert descriptor.is_plain

    def test_attributes_become_frozenset(self):
        descriptor = StyleDescriptor(attributes=[Attribute.BOLD, Attribute.BOLD])
        assert descriptor.attributes == frozenset({Attribute.BOLD})
        assert descriptor.has(Attribute.BOLD)
        assert not descriptor.has(Attribute.ITALIC)

    def test_hashable(self):
        a = StyleDescriptor(Named(NamedColor.RED), None, frozenset({Attribute.BOLD}))
        b = StyleDescriptor(Named(NamedColor.RED), None, {Attribute.BOLD})
        assert a == b
        assert len({a, b}) == 1
