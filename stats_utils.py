"""Dashboard numbers and the grade progression series for a set of climbs."""
import pandas as pd

from config import CHART_COLUMNS, NO_SESSION, RECENT_COUNT, UNRATED_LABEL
from grade_utils import UNPARSEABLE, value_to_yds


def _short_date(date):
    if pd.isna(date):
        return ''
    return f"{date:%b} {date.day}"


def summary_stats(data):
    """Summarise climbs the way the dashboard shows them.

    The top grade is picked by unified value, so "V10" beats "5.9" even
    though it sorts lower as text. Climbs with an unrecognised grade are
    ignored for top and average grade.
    """
    rated = data[data['grade_value'] > UNPARSEABLE]
    if rated.empty:
        top_grade = UNRATED_LABEL
        average_grade = UNRATED_LABEL
    else:
        top_grade = rated['grade'].iloc[rated['grade_value'].to_numpy().argmax()]
        average_grade = value_to_yds(rated['grade_value'].mean())

    recent = data.tail(RECENT_COUNT).iloc[::-1]
    if recent.empty or pd.isna(recent['date'].iloc[0]):
        latest_session = NO_SESSION
    else:
        latest_session = recent['date'].iloc[0].strftime('%Y-%m-%d')

    return {
        'total': len(data),
        'sent': int(data['sent'].eq(True).sum()),
        'top_grade': top_grade,
        'average_grade': average_grade,
        'recent': recent.to_dict('records'),
        'latest_session': latest_session,
    }


def progression_series(data):
    """Build the grade-over-time series, oldest climb first."""
    if data.empty:
        return pd.DataFrame(columns=CHART_COLUMNS)

    ordered = data.sort_values('date', kind='stable', na_position='last')
    return pd.DataFrame({
        'date': ordered['date'],
        'label': ordered['date'].map(_short_date),
        'value': ordered['grade_value'],
        'grade': ordered['grade'],
        'name': ordered['name'],
    }, columns=CHART_COLUMNS).reset_index(drop=True)
