"""HTML fragments for the two dashboard screens and the error view.

All builders are pure: they read the rover values passed in and return
markup. Interpolated values are HTML-escaped; a missing value renders as
blank text.
"""

from __future__ import annotations

import html
from collections.abc import Iterable
from typing import Any

from marsdash._constants import DEFAULT_IMAGE_DIR
from marsdash.models.rover import Photo, Rover


def _text(value: Any) -> str:
    if value is None:
        return ""
    return html.escape(str(value), quote=True)


def _join(fragments: Iterable[str]) -> str:
    return "\n".join(fragments)


# ----------------------------------------------------------------------
# Rover list
# ----------------------------------------------------------------------


def rover_image(rover: Rover, image_dir: str = DEFAULT_IMAGE_DIR) -> str:
    return f'<img src="{_text(image_dir)}/{_text(rover.name)}.jpg" class="card-image">'


def rover_status(rover: Rover) -> str:
    return f"The mission is {_text(rover.status)}"


def card_id(rover: Rover) -> str:
    """Element id of a rover's card; a missing id gives an empty string."""
    return _text(rover.id)


def rover_card(rover: Rover, image_dir: str = DEFAULT_IMAGE_DIR) -> str:
    return (
        f'<div class="card-container" id="{card_id(rover)}">\n'
        f"    {rover_image(rover, image_dir)}\n"
        '    <div class="card-body-container">\n'
        f"        <h3>{_text(rover.name)}</h3>\n"
        f"        <p>{rover_status(rover)}</p>\n"
        "    </div>\n"
        "</div>"
    )


def rovers_view(rovers: Iterable[Rover], image_dir: str = DEFAULT_IMAGE_DIR) -> str:
    """Grid of rover cards, one per rover, in store order."""
    cards = _join(rover_card(rover, image_dir) for rover in rovers)
    return f'<div class="rovers-section-layout">\n{cards}\n</div>'


# ----------------------------------------------------------------------
# Rover detail
# ----------------------------------------------------------------------


def _labeled(label: str, value: Any) -> str:
    return f'<p><b class="rover-line-title">{label}: </b>{_text(value)}</p>'


def _line(*fragments: str) -> str:
    body = _join(f"    {fragment}" for fragment in fragments)
    return f'<div class="rover-line-container">\n{body}\n</div>'


def photo_date_caption(rover: Rover) -> str:
    return f'<p>Photos taken the <b class="rover-line-title"> {_text(rover.max_date)}</b> :</p>'


def photo_gallery(photos: Iterable[Photo]) -> str:
    return _join(f'<img src="{_text(photo.img_src)}" class="rover-photo">' for photo in photos)


def rover_view(rover: Rover) -> str:
    lines = [
        _line(_labeled("Name", rover.name), _labeled("Status", rover.status)),
        _line(_labeled("Launching", rover.launch_date), _labeled("Landing", rover.landing_date)),
        _line(_labeled("Total Photos", rover.total_photos)),
        _line(photo_date_caption(rover)),
        _line(photo_gallery(rover.photos)),
    ]
    return f'<div class="rover-container">\n{_join(lines)}\n</div>'


# ----------------------------------------------------------------------
# Errors
# ----------------------------------------------------------------------


def error_view() -> str:
    """Static fragment shown when a fetch chain fails; there is no retry."""
    hint = _labeled("Network Error", "Please reload the page and try again")
    return f'<div class="rover-container">\n{_line(hint)}\n</div>'
