"""Rendering: render-or-fetch decisions, HTML fragments and the root surface."""
