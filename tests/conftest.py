import httpx
import pytest
from fastapi.testclient import TestClient

from faleproxy.fetch.scraper import get_http_client
from faleproxy.main import app

SAMPLE_HTML_WITH_YALE = """<!DOCTYPE html>
<html>
<head>
    <title>Yale University Test Page</title>
    <meta name="description" content="Yale University official website">
</head>
<body>
    <header>
        <h1>Welcome to Yale University</h1>
        <nav>
            <ul>
                <li><a href="https://www.yale.edu/about">About Yale</a></li>
                <li><a href="https://www.yale.edu/admissions">Yale Admissions</a></li>
                <li><a href="https://www.yale.edu/academics">Academics</a></li>
            </ul>
        </nav>
    </header>
    <main>
        <p>Yale University is a private Ivy League research university in New Haven, Connecticut.</p>
        <p>Founded in 1701, YALE is the third-oldest institution of higher education in the United States.</p>
        <img src="https://www.yale.edu/images/logo.png" alt="Yale Logo">
        <p>Contact us at <a href="mailto:info@yale.edu">info@yale.edu</a></p>
    </main>
    <footer>
        <p>&copy; 2023 Yale University. All rights reserved.</p>
    </footer>
</body>
</html>
"""

@pytest.fixture
def sample_html_with_yale():
    return SAMPLE_HTML_WITH_YALE

@pytest.fixture
def relay_client():
    """
    Build a TestClient whose upstream requests are answered by `handler`.

    The handler receives the outgoing httpx.Request and returns an
    httpx.Response, or raises an httpx error to simulate a network failure.
    """
    def _make(handler):
        async def _mock_http_client():
            async with httpx.AsyncClient(
                transport=httpx.MockTransport(handler),
                follow_redirects=True
            ) as client:
                yield client

        app.dependency_overrides[get_http_client] = _mock_http_client
        return TestClient(app)

    yield _make

    app.dependency_overrides.clear()
