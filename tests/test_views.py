import pytest
from django.urls import reverse


def test_bs_to_ad(client):
    response = client.get(reverse('bs_calendar:bs_to_ad'), {'date': '2072-01-12T11:56:25'})
    assert response.status_code == 200
    assert response.json() == {
        'bs': '2072-01-12T11:56:25.000',
        'ad': '2015-04-25T11:56:25',
        'weekday': 6,
    }


def test_bs_to_ad_accepts_nepali_digits(client):
    response = client.get(reverse('bs_calendar:bs_to_ad'), {'date': '२०८१-०१-०१'})
    assert response.status_code == 200
    assert response.json()['ad'] == '2024-04-13T00:00:00'


def test_ad_to_bs(client):
    response = client.get(reverse('bs_calendar:ad_to_bs'), {'date': '2024-04-13'})
    assert response.status_code == 200
    assert response.json()['bs'] == '2081-01-01T00:00:00.000'
    assert response.json()['weekday'] == 6


@pytest.mark.parametrize('name, params', [
    ('bs_calendar:bs_to_ad', {'date': '2076-13-40'}),
    ('bs_calendar:bs_to_ad', {'date': '2095-01-01'}),
    ('bs_calendar:bs_to_ad', {}),
    ('bs_calendar:ad_to_bs', {'date': 'yesterday'}),
    ('bs_calendar:ad_to_bs', {'date': '1900-01-01'}),
    ('bs_calendar:format_number', {'value': '12a3'}),
    ('bs_calendar:format_number', {'value': '12', 'language': 'hindi'}),
    ('bs_calendar:format_number', {'value': '12', 'decimal_digits': 'two'}),
])
def test_bad_input_is_a_400(client, name, params):
    response = client.get(reverse(name), params)
    assert response.status_code == 400
    assert response.json()['message'].startswith('Error:')


def test_format_number(client):
    response = client.get(reverse('bs_calendar:format_number'), {
        'value': '123456789.6548',
        'in_words': '1',
        'monetary': 'true',
        'decimal_digits': '2',
        'language': 'english',
    })
    assert response.status_code == 200
    assert response.json() == {
        'value': '123456789.6548',
        'formatted': '12 crore 34 lakh 56 thousand 7 hundred 89 rupees 65 paisa',
    }


def test_format_number_with_symbol(client):
    response = client.get(reverse('bs_calendar:format_number'), {'value': '123456', 'symbol': 'Rs.', 'monetary': '1'})
    assert response.json()['formatted'] == 'Rs. 1,23,456.00'


def test_symbol_needs_monetary(client):
    response = client.get(reverse('bs_calendar:format_number'), {'value': '123456', 'symbol': 'Rs.'})
    assert response.json()['formatted'] == '1,23,456.00'


def test_only_get_is_allowed(client):
    response = client.post(reverse('bs_calendar:format_number'), {'value': '1'})
    assert response.status_code == 405
