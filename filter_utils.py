import pandas as pd

from config import (
    TYPE_FILTER_ALL,
    TYPE_FILTER_FAVORITES,
    TYPE_FILTER_INDOOR,
    TYPE_FILTER_OUTDOOR,
)
from grade_utils import grade_to_value, is_bouldering


def _type_mask(data, type_filter):
    if type_filter == TYPE_FILTER_ALL:
        return pd.Series(True, index=data.index)
    if type_filter == TYPE_FILTER_FAVORITES:
        return data['favorite'].eq(True)
    if type_filter in (TYPE_FILTER_INDOOR, TYPE_FILTER_OUTDOOR):
        return data['type'].astype(str).str.contains(type_filter, regex=False)
    return data['type'] == type_filter


def grade_range_values(min_grade, max_grade, type_filter=TYPE_FILTER_ALL):
    """Convert the grade range inputs to unified values.

    Bounds are read as Fontainebleau grades only when the type filter itself
    is a bouldering one. An empty bound becomes None.
    """
    context = 'bouldering' if is_bouldering(type_filter) else ''
    min_value = grade_to_value(min_grade, context) if min_grade else None
    max_value = grade_to_value(max_grade, context) if max_grade else None
    return min_value, max_value


def apply_filters(data, type_filter=TYPE_FILTER_ALL, min_grade='', max_grade=''):
    """Apply the type filter and grade range to the climbs."""
    filtered_data = data[_type_mask(data, type_filter)]

    min_value, max_value = grade_range_values(min_grade, max_grade, type_filter)
    if min_value is not None:
        filtered_data = filtered_data[filtered_data['grade_value'] >= min_value]
    if max_value is not None:
        filtered_data = filtered_data[filtered_data['grade_value'] <= max_value]

    return filtered_data.copy()
