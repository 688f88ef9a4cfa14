"""Core rendering: elements, options, the field base class and the type registry."""
