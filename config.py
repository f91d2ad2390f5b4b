"""Shared constants for climb records, filters and dashboard output."""

CLIMB_TYPES = (
    'Indoor Bouldering',
    'Indoor Top Rope',
    'Indoor Lead',
    'Outdoor Bouldering',
    'Outdoor Sport',
    'Outdoor Trad',
)

# Type filter choices offered next to the concrete climb types
TYPE_FILTER_ALL = 'All'
TYPE_FILTER_FAVORITES = 'Favorites'
TYPE_FILTER_INDOOR = 'Indoor'
TYPE_FILTER_OUTDOOR = 'Outdoor'
TYPE_FILTER_OPTIONS = (
    TYPE_FILTER_ALL,
    TYPE_FILTER_FAVORITES,
    TYPE_FILTER_INDOOR,
    TYPE_FILTER_OUTDOOR,
) + CLIMB_TYPES

REQUIRED_FIELDS = ('id', 'grade', 'type')

CLIMB_COLUMNS = [
    'id', 'name', 'date', 'grade', 'type', 'notes', 'sent', 'favorite',
    'lat', 'lng', 'location_name', 'grade_value',
]
CHART_COLUMNS = ['date', 'label', 'value', 'grade', 'name']

RECENT_COUNT = 3
UNRATED_LABEL = 'N/A'
NO_SESSION = '-'
