import pytest

from factories import checkbox, files, number, rich, select, title


@pytest.fixture
def make_page():
    def _make(page_id="page-1", **props):
        return {"id": page_id, "properties": props}

    return _make


@pytest.fixture
def full_watch_page(make_page):
    return make_page(
        "watch-1",
        **{
            "Watch": title(""),
            "Brand": select("Rolex"),
            "Model": rich("Submariner"),
            "Reference Number": rich("124060"),
            "Asking Price": number(12345),
            "Case Size": number(41),
            "Year": number(2021.6),
            "Condition": select("Excellent"),
            "Material": select("Steel"),
            "Dial Color": select("Black"),
            "Box & Papers": checkbox(True),
            "Extra Details": rich("Full set"),
            "Images": files("https://img/1.jpg", "https://img/2.jpg"),
        },
    )
