# apps/core/domain/scopes.py
from typing import Iterable, List, Union

CALENDAR_SCOPE = 'https://www.googleapis.com/auth/calendar'


def normalize_scopes(scopes: Union[str, Iterable[str], None]) -> List[str]:
    """Google zwraca scope jako string rozdzielony spacjami albo listę."""
    if not scopes:
        return []
    if isinstance(scopes, str):
        return scopes.split()
    return list(scopes)


def has_calendar_scope(scopes) -> bool:
    # Dokładne dopasowanie: 'calendar.readonly' nie wystarczy
    return CALENDAR_SCOPE in normalize_scopes(scopes)
