from __future__ import annotations

from marsdash.models import Photo, Rover
from marsdash.view import templates


def _curiosity(**overrides: object) -> Rover:
    fields: dict[str, object] = {
        "id": 5,
        "name": "Curiosity",
        "landing_date": "2012-08-06",
        "launch_date": "2011-11-26",
        "status": "active",
        "max_date": "2021-01-01",
        "total_photos": 477808,
    }
    fields.update(overrides)
    return Rover.model_validate(fields)


def test_rover_card_uses_id_name_status_and_image_convention() -> None:
    card = templates.rover_card(_curiosity())

    assert '<div class="card-container" id="5">' in card
    assert '<img src="images/Curiosity.jpg" class="card-image">' in card
    assert "<h3>Curiosity</h3>" in card
    assert "<p>The mission is active</p>" in card


def test_rover_card_honours_image_dir() -> None:
    card = templates.rover_card(_curiosity(), image_dir="static/rovers")

    assert 'src="static/rovers/Curiosity.jpg"' in card


def test_card_id_is_blank_for_rover_without_id() -> None:
    rover = Rover(name="Spirit")

    assert templates.card_id(_curiosity()) == "5"
    assert templates.card_id(rover) == ""
    assert '<div class="card-container" id="">' in templates.rover_card(rover)


def test_rovers_view_has_one_card_per_rover_in_order() -> None:
    rovers = [_curiosity(), _curiosity(id=7, name="Spirit", status="complete")]

    markup = templates.rovers_view(rovers)

    assert markup.startswith('<div class="rovers-section-layout">')
    assert markup.count('class="card-container"') == 2
    assert markup.index("Curiosity") < markup.index("Spirit")


def test_rovers_view_without_rovers_is_an_empty_grid() -> None:
    markup = templates.rovers_view([])

    assert 'class="rovers-section-layout"' in markup
    assert "card-container" not in markup


def test_rover_view_lists_labeled_fields_and_gallery() -> None:
    rover = _curiosity(
        photos=[
            {"img_src": "https://mars.nasa.gov/a.jpg", "sol": 3004, "earth_date": "2021-01-01", "camera": 20},
            {"img_src": "https://mars.nasa.gov/b.jpg", "sol": 3004, "earth_date": "2021-01-01", "camera": 21},
        ]
    )

    markup = templates.rover_view(rover)

    assert '<b class="rover-line-title">Name: </b>Curiosity' in markup
    assert '<b class="rover-line-title">Status: </b>active' in markup
    assert '<b class="rover-line-title">Launching: </b>2011-11-26' in markup
    assert '<b class="rover-line-title">Landing: </b>2012-08-06' in markup
    assert '<b class="rover-line-title">Total Photos: </b>477808' in markup
    assert "Photos taken the" in markup and "2021-01-01" in markup
    assert markup.count('class="rover-photo"') == 2
    assert '<img src="https://mars.nasa.gov/a.jpg" class="rover-photo">' in markup


def test_missing_fields_render_blank() -> None:
    markup = templates.rover_view(Rover(name="Spirit"))

    assert '<b class="rover-line-title">Status: </b></p>' in markup
    assert "None" not in markup


def test_values_are_escaped() -> None:
    card = templates.rover_card(_curiosity(status='<script>alert("x")</script>'))

    assert "<script>" not in card
    assert "&lt;script&gt;" in card


def test_photo_gallery_is_empty_without_photos() -> None:
    assert templates.photo_gallery(()) == ""
    assert templates.photo_gallery([Photo(img_src="https://mars.nasa.gov/a.jpg")]).count("<img") == 1


def test_error_view_mentions_network_error() -> None:
    markup = templates.error_view()

    assert "Network Error" in markup
    assert "Please reload the page and try again" in markup
