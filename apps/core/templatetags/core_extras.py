from django import template
register = template.Library()


@register.filter
def cell_state(cell, selected_date=None):
    """Klasa CSS dla komórki kalendarza."""
    if cell.disabled:
        return 'disabled'
    if selected_date and cell.date == selected_date:
        return 'selected'
    return 'available'


@register.simple_tag
def step_range(size=4):
    # Numery kroków rejestracji: 1..size
    return range(1, int(size) + 1)
