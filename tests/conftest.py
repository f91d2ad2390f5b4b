import pytest

from data_loader import load_climbs


@pytest.fixture
def climb_records():
    return [
        {
            'id': '1', 'name': 'Midnight Lightning', 'date': '2024-03-05',
            'grade': 'V8', 'type': 'Outdoor Bouldering',
            'location': {'lat': 37.7415, 'lng': -119.6029, 'name': 'Camp 4'},
            'notes': 'Finally!', 'sent': True, 'favorite': True,
        },
        {
            'id': '2', 'name': 'Biographie', 'date': '2024-01-20',
            'grade': '9a+', 'type': 'Outdoor Sport',
            'location': {'lat': 44.2445, 'lng': 5.6286, 'name': 'Ceuse'},
            'sent': False,
        },
        {
            'id': '3', 'name': 'Gym warmup', 'date': '2024-02-10',
            'grade': ' 5.10a ', 'type': 'Indoor Top Rope', 'sent': True,
        },
        {
            'id': '4', 'name': 'La Marie Rose', 'date': '2024-04-01',
            'grade': '6A', 'type': 'Outdoor Bouldering',
            'location': {'lat': 48.4470, 'lng': 2.6364, 'name': 'Bas Cuvier'},
            'sent': True, 'favorite': True,
        },
        {
            'id': '5', 'name': 'Mystery project', 'date': '2024-02-28',
            'grade': '?', 'type': 'Indoor Lead',
        },
    ]


@pytest.fixture
def climbs(climb_records):
    return load_climbs(climb_records)
