# bs_calendar/views.py
from datetime import datetime

from django.http import JsonResponse
from django.views.decorators.http import require_GET

from .exceptions import BsCalendarError
from .nepali_datetime import NepaliDateTime
from .number_format import NepaliNumberFormat
from .unicode import to_english_digits

_TRUE_VALUES = ('1', 'true', 'yes', 'on')


def _flag(request, name):
    return request.GET.get(name, '').strip().lower() in _TRUE_VALUES


def _query_value(request, name):
    value = request.GET.get(name)
    if value is None or not value.strip():
        raise ValueError(f"Missing '{name}' parameter.")
    # Accept Devanagari digits from Nepali keyboards
    return to_english_digits(value.strip())


def _conversion_payload(bs_value):
    return {
        'bs': bs_value.isoformat(),
        'ad': bs_value.to_datetime().isoformat(),
        'weekday': bs_value.weekday,
    }


@require_GET
def bs_to_ad_view(request):
    """
    /convert/bs-to-ad/?date=2072-01-12T11:56:25
    """
    try:
        bs_value = NepaliDateTime.parse(_query_value(request, 'date'))
        return JsonResponse(_conversion_payload(bs_value))
    except (BsCalendarError, ValueError) as e:
        return JsonResponse({"message": f"Error: {e}"}, status=400)


@require_GET
def ad_to_bs_view(request):
    """
    /convert/ad-to-bs/?date=2015-04-25 (a time part is optional)
    """
    try:
        ad_value = datetime.fromisoformat(_query_value(request, 'date'))
        bs_value = NepaliDateTime.from_datetime(ad_value)
        return JsonResponse(_conversion_payload(bs_value))
    except (BsCalendarError, ValueError) as e:
        return JsonResponse({"message": f"Error: {e}"}, status=400)


@require_GET
def format_number_view(request):
    """
    /format-number/?value=123456789.65&in_words=1&monetary=1&language=nepali
    """
    try:
        value = _query_value(request, 'value')
        decimal_digits = request.GET.get('decimal_digits')
        number_format = NepaliNumberFormat(
            in_words=_flag(request, 'in_words'),
            is_monetary=_flag(request, 'monetary'),
            decimal_digits=int(decimal_digits) if decimal_digits else None,
            symbol=request.GET.get('symbol') or None,
            language=request.GET.get('language') or None,
        )
        return JsonResponse({'value': value, 'formatted': number_format.format(value)})
    except (BsCalendarError, ValueError) as e:
        return JsonResponse({"message": f"Error: {e}"}, status=400)
