import logging
from collections.abc import Mapping

import pandas as pd

from config import CLIMB_COLUMNS, REQUIRED_FIELDS
from grade_utils import UNPARSEABLE, grade_to_value

logger = logging.getLogger(__name__)


def _record_to_row(record):
    if not isinstance(record, Mapping):
        raise ValueError(f"Climb record must be a mapping, got {type(record).__name__}")
    for field in REQUIRED_FIELDS:
        if field not in record:
            raise ValueError(f"Climb record is missing required field '{field}'")

    location = record.get('location') or {}
    return {
        'id': record['id'],
        'name': record.get('name', ''),
        'date': record.get('date'),
        'grade': record['grade'].strip() if isinstance(record['grade'], str) else '',
        'type': record['type'],
        'notes': record.get('notes', ''),
        'sent': bool(record.get('sent', False)),
        'favorite': bool(record.get('favorite', False)),
        'lat': location.get('lat', float('nan')),
        'lng': location.get('lng', float('nan')),
        'location_name': location.get('name', ''),
    }


def add_grade_values(data, grade_column='grade', type_column='type'):
    """Return a copy of the frame with a numeric ``grade_value`` column."""
    data = data.copy()
    values = [grade_to_value(grade, climb_type)
              for grade, climb_type in zip(data[grade_column], data[type_column])]
    data['grade_value'] = pd.Series(values, index=data.index, dtype=float)
    return data


def load_climbs(records):
    """Load climb records into a DataFrame ready for filtering and charting.

    Each record follows the logbook entry shape: ``id``, ``grade`` and ``type``
    are required; ``location`` is an optional ``{lat, lng, name}`` mapping.
    Raises ValueError for a record that is not a mapping or lacks a
    required field.
    """
    rows = [_record_to_row(record) for record in records]
    df = pd.DataFrame(rows, columns=CLIMB_COLUMNS[:-1])
    df['date'] = pd.to_datetime(df['date'], errors='coerce')
    df['lat'] = pd.to_numeric(df['lat'], errors='coerce')
    df['lng'] = pd.to_numeric(df['lng'], errors='coerce')
    df = add_grade_values(df)

    unrated = int((df['grade_value'] == UNPARSEABLE).sum())
    if unrated:
        logger.debug("%d of %d climbs have an unrecognised grade", unrated, len(df))
    return df


def with_coordinates(data):
    """Keep only climbs that can be placed on a map."""
    return data.dropna(subset=['lat', 'lng'])
