"""Convert climbing grades from any common system to one numeric scale.

The scale is anchored to the YDS number, so 5.10a reads as 10.0. V-scale,
Fontainebleau, French sport and Ewbank grades are mapped onto the same axis
so climbs from different systems can be sorted, filtered and charted together.
A value of 0 means the label could not be read.
"""
import math
import re
from enum import Enum
from types import MappingProxyType

UNPARSEABLE = 0.0

# Fontainebleau bouldering grades read harder than French sport grades of the
# same name, so the two tables diverge from 6A upwards.
FONT_BOULDER_GRADES = MappingProxyType({
    '4A': 9, '4B': 9.5, '4C': 10,
    '5A': 10.5, '5B': 11, '5C': 11.5,
    '6A': 13, '6A+': 13.5, '6B': 14, '6B+': 14.5, '6C': 15, '6C+': 15.5,
    '7A': 16, '7A+': 17, '7B': 18, '7B+': 19, '7C': 20, '7C+': 21,
    '8A': 22, '8A+': 23, '8B': 24, '8B+': 25, '8C': 26, '8C+': 27,
})

FRENCH_SPORT_GRADES = MappingProxyType({
    '4A': 4, '4B': 5, '4C': 6,
    '5A': 7, '5B': 8, '5C': 9,
    '6A': 10, '6A+': 10.25, '6B': 10.5, '6B+': 10.75, '6C': 11, '6C+': 11.25,
    '7A': 11.75, '7A+': 12, '7B': 12.25, '7B+': 12.5, '7C': 12.75, '7C+': 13,
    '8A': 13.25, '8A+': 13.5, '8B': 13.75, '8B+': 14, '8C': 14.25, '8C+': 14.5,
    '9A': 14.75, '9A+': 15, '9B': 15.25, '9B+': 15.5,
})

YDS_LETTER_MODIFIERS = MappingProxyType({'A': 0.0, 'B': 0.25, 'C': 0.5, 'D': 0.75})
YDS_SIGN_MODIFIERS = MappingProxyType({'+': 0.5, '-': -0.25})

V_SCALE_OFFSET = 10
V_BASIC_VALUE = 9
EWBANK_RANGE = range(10, 40)

_NON_NUMERIC_RE = re.compile(r'[^0-9.]')
_FLOAT_PREFIX_RE = re.compile(r'[0-9]+(?:\.[0-9]*)?|\.[0-9]+')
_YDS_RE = re.compile(r'([0-9]+)([ABCD]?)([+-]?)')
_FRENCH_RE = re.compile(r'([0-9])([ABC])(\+?)')
_DIGITS_RE = re.compile(r'[0-9]+')


class GradeSystem(Enum):
    V_SCALE = 'v_scale'
    YDS = 'yds'
    FRENCH = 'french'
    EWBANK = 'ewbank'
    UNKNOWN = 'unknown'


def _clean(grade):
    if not isinstance(grade, str):
        return ''
    return grade.strip().upper()


def is_bouldering(climb_type):
    """True when the climb type names a bouldering discipline."""
    return isinstance(climb_type, str) and 'bouldering' in climb_type.lower()


def _ewbank_number(label):
    # Anything past two significant digits is outside the Ewbank range
    digits = label.lstrip('0') or '0'
    if len(digits) > 2:
        return None
    return int(digits)


def _classify(label):
    if label.startswith('V'):
        return GradeSystem.V_SCALE
    if label.startswith('5.'):
        return GradeSystem.YDS
    if _FRENCH_RE.fullmatch(label):
        return GradeSystem.FRENCH
    if _DIGITS_RE.fullmatch(label) and _ewbank_number(label) in EWBANK_RANGE:
        return GradeSystem.EWBANK
    return GradeSystem.UNKNOWN


def classify_grade(grade):
    """Return the grading system that would handle this label."""
    return _classify(_clean(grade))


def _v_scale_value(label, bouldering):
    if label == 'VB' or 'EASY' in label:
        return float(V_BASIC_VALUE)
    digits = _NON_NUMERIC_RE.sub('', label[1:])
    match = _FLOAT_PREFIX_RE.match(digits)
    if not match:
        return UNPARSEABLE
    # Rough visual equivalence: V0 sits next to 5.10a.
    return float(match.group()) + V_SCALE_OFFSET


def _yds_value(label, bouldering):
    match = _YDS_RE.match(label[2:])
    if not match:
        return UNPARSEABLE
    base, letter, sign = match.groups()
    if letter:
        modifier = YDS_LETTER_MODIFIERS[letter]
    else:
        modifier = YDS_SIGN_MODIFIERS.get(sign, 0.0)
    return float(base) + modifier


def _french_value(label, bouldering):
    digit, letter, plus = _FRENCH_RE.fullmatch(label).groups()
    key = f"{digit}{letter}{plus}"
    number = int(digit)
    if bouldering:
        return float(FONT_BOULDER_GRADES.get(key, number * 2.5))
    return float(FRENCH_SPORT_GRADES.get(key, number + 4))


def _ewbank_value(label, bouldering):
    # Ewbank 18 ~ 5.9, Ewbank 22 ~ 5.11a
    return (_ewbank_number(label) - 9) / 2 + 4.5


def _unknown_value(label, bouldering):
    return UNPARSEABLE


_CONVERTERS = {
    GradeSystem.V_SCALE: _v_scale_value,
    GradeSystem.YDS: _yds_value,
    GradeSystem.FRENCH: _french_value,
    GradeSystem.EWBANK: _ewbank_value,
    GradeSystem.UNKNOWN: _unknown_value,
}


def grade_to_value(grade, climb_type=''):
    """Convert a climbing grade to its value on the unified scale.

    ``climb_type`` only matters for labels such as ``7A`` that are valid
    both as Fontainebleau and French sport grades: a type containing
    "bouldering" selects the Fontainebleau reading. Returns 0.0 for any
    label that no grading system recognises.
    """
    label = _clean(grade)
    return _CONVERTERS[_classify(label)](label, is_bouldering(climb_type))


def value_to_yds(value):
    """Convert a unified value back to the nearest YDS label at or below it."""
    if value is None or not math.isfinite(value * 4) or value <= 0:
        return ''
    quarters = math.floor(value * 4)
    base, remainder = divmod(quarters, 4)
    if base < 10:
        return f"5.{base}+" if remainder >= 2 else f"5.{base}"
    return f"5.{base}{'abcd'[remainder]}"
