"""Test configuration and fixtures."""

import pytest

FIRST_DIRECTION = "Детский дом культуры им.Кирова – ул. Милиционера Власова"
SECOND_DIRECTION = "ул. Милиционера Власова – Детский дом культуры им.Кирова"


def _stop_items(count: int, first_id: int) -> str:
    return "\n".join(
        f'<li><a href="/time-table/80/{first_id + i}">'
        f'<span class="stop-name">Остановка {first_id + i}</span>\n</a></li>'
        for i in range(count)
    )


@pytest.fixture
def sample_search_html():
    """Search results for "80" with a single bus route."""
    return """<!DOCTYPE html>
<html>
<head><title>Поиск</title></head>
<body>
<!-- search results -->
<div class="search-results">
    <a href="/route/80/" class="list-group-item">
        <div class="route-item">
            <h4>Автобус «80, ДДК им. Кирова - ул. Милиционера Власова»</h4>
            <p class="route-info">Маршрут городской</p>
        </div>
    </a>
</div>
</body>
</html>
"""


@pytest.fixture
def sample_multi_search_html():
    """Search results for "12": a tram, a bus and an unsupported category."""
    return """<html><body>
<a href="/routes-list/1/">Все маршруты</a>
<div class="search-results">
    <a href="/route/812/"><div><h4>Трамвай «12, Школа № 107 - Разгуляй»</h4></div></a>
    <a href="/route/912/"><div><h4>Паром «12, Речной вокзал - Заостровка»</h4></div></a>
    <a href="/route/12/"><div><h4>Автобус «12, Дворец культуры им. Гагарина - ОАО &quot;ПЗСП&quot;»</h4></div></a>
</div>
</body></html>
"""


@pytest.fixture
def sample_taxi_search_html():
    """Search results for "7т" with a fixed-route taxi."""
    return """<html><body>
<a href="/route/207/">
    <h4>Маршрутное такси «7т, Н.Крым - Центральный рынок»</h4>
</a>
</body></html>
"""


@pytest.fixture
def sample_bus_listing_html():
    """Listing page of all bus routes."""
    return """<html><body>
<h2>Автобусы</h2>
<ul class="routes">
    <li><a href="/route/1/">1, Гознак - Ж/д вокзал Пермь-II</a></li>
    <li><a href="/route/3/">3, Детский дом культуры им.Кирова - м/р Юбилейный</a></li>
    <li><a href="/route/110/">10а, Технопарк - ул. Уинская</a></li>
    <li><a href="/route/80/">80, ДДК им. Кирова - ул. Милиционера Власова</a></li>
</ul>
<a href="/about/">О сайте</a>
</body></html>
"""


@pytest.fixture
def sample_route_html():
    """Route 80 detail page with two directions of 26 and 20 stops."""
    return f"""<html><body>
<a href="/time-table/80/1">Ссылка до направлений</a>
<h1>Автобус 80</h1>
<div class="direction">
    <h3>{FIRST_DIRECTION}</h3>
    <a href="/route-map/80/0/">Карта</a>
    <ul class="stops">
{_stop_items(26, 1701)}
    </ul>
</div>
<div class="direction">
    <h3>{SECOND_DIRECTION}</h3>
    <ul class="stops">
{_stop_items(20, 2701)}
    </ul>
</div>
</body></html>
"""


@pytest.fixture
def sample_timetable_html():
    """Stop timetable with footnotes and stray text nodes."""
    return """<html><body>
<h2>Расписание</h2>
<ul class="time-table">
    <li>
        <div class="hour">5</div>
        <div class="minute trip-with-note">50</div>
    </li>
    <li>
        <div class="hour">
            6
        </div>
        <div class="minute trip-with-note">*16</div>
        <div class="minute trip-with-note">38<span class="note">*</span></div>
    </li>
    <li>
        <div class="hour">7</div>
        <div class="minute trip-with-note">01</div>
        <div class="minute trip-with-note">23</div>
        <div class="minute trip-with-note">45
        </div>
    </li>
</ul>
<p>* рейс до ул. Милиционера Власова</p>
</body></html>
"""
