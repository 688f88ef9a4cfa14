"""Built-in field variants."""

from adminfields.fields.button import Button
from adminfields.fields.checkbox import Checkbox, Toggle
from adminfields.fields.choice import ButtonGroup, CheckboxGroup, Radio, Select
from adminfields.fields.compound import AmountType, Dimensions, Link, NumberUnit, Price
from adminfields.fields.dates import Date, DateRange, DateTime, Time, TimeRange
from adminfields.fields.number import Number, Range
from adminfields.fields.text import Color, Hidden, Text, Textarea

__all__ = [
    "AmountType",
    "Button",
    "ButtonGroup",
    "Checkbox",
    "CheckboxGroup",
    "Color",
    "Date",
    "DateRange",
    "DateTime",
    "Dimensions",
    "Hidden",
    "Link",
    "Number",
    "NumberUnit",
    "Price",
    "Radio",
    "Range",
    "Select",
    "Text",
    "Textarea",
    "Time",
    "TimeRange",
    "Toggle",
]
