"""Biquad coefficient computation for linear filters."""

from __future__ import annotations

import math

from .types import BiQuad, Filter, FilterType

__all__ = ["UnsupportedFilterError", "compute_biquad"]


class UnsupportedFilterError(ValueError):
    """Raised when a filter type cannot be expressed as a single biquad."""


def compute_biquad(rate: float, filter: Filter) -> BiQuad:
    """Return the normalised biquad coefficients of ``filter`` at sample rate ``rate``."""
    f = filter
    t = f.type

    if t == FilterType.PEAK:
        a = 10 ** (f.g / 40.0)
        w0 = 2 * math.pi * f.f / rate
        alpha = math.sin(w0) * 0.5 / f.q
        alpha1 = alpha * a
        alpha2 = alpha / a
        a0 = 1.0 + alpha2
        b1 = (-2.0 * math.cos(w0)) / a0
        return BiQuad(
            b0=(1.0 + alpha1) / a0,
            b1=b1,
            b2=(1.0 - alpha1) / a0,
            a1=b1,
            a2=(1.0 - alpha2) / a0,
        )

    if t == FilterType.LOW_PASS:
        w0 = 2 * math.pi * f.f / rate
        alpha = math.sin(w0) * 0.5 / f.q
        a0 = 1.0 + alpha
        b1 = (1.0 - math.cos(w0)) / a0
        b0 = b1 * 0.5
        return BiQuad(
            b0=b0,
            b1=b1,
            b2=b0,
            a1=(-2.0 * math.cos(w0)) / a0,
            a2=(1.0 - alpha) / a0,
        )

    if t == FilterType.HIGH_PASS:
        w0 = 2 * math.pi * f.f / rate
        alpha = math.sin(w0) * 0.5 / f.q
        a0 = 1.0 + alpha
        b1 = -(1.0 + math.cos(w0)) / a0
        b0 = b1 * -0.5
        return BiQuad(
            b0=b0,
            b1=b1,
            b2=b0,
            a1=(-2.0 * math.cos(w0)) / a0,
            a2=(1.0 - alpha) / a0,
        )

    if t == FilterType.LOW_SHELF:
        a = 10 ** (f.g / 40.0)
        w0 = 2 * math.pi * f.f / rate
        cos_w0 = math.cos(w0)
        alpha = math.sin(w0) * 0.5 / f.q
        alpha2 = 2 * math.sqrt(a) * alpha
        a0 = (a + 1) + (a - 1) * cos_w0 + alpha2
        return BiQuad(
            b0=(a * ((a + 1) - (a - 1) * cos_w0 + alpha2)) / a0,
            b1=(2 * a * ((a - 1) - (a + 1) * cos_w0)) / a0,
            b2=(a * ((a + 1) - (a - 1) * cos_w0 - alpha2)) / a0,
            a1=(-2 * ((a - 1) + (a + 1) * cos_w0)) / a0,
            a2=((a + 1) + (a - 1) * cos_w0 - alpha2) / a0,
        )

    if t == FilterType.HIGH_SHELF:
        a = 10 ** (f.g / 40.0)
        w0 = 2 * math.pi * f.f / rate
        cos_w0 = math.cos(w0)
        alpha = math.sin(w0) * 0.5 / f.q
        alpha2 = 2 * math.sqrt(a) * alpha
        a0 = (a + 1) - (a - 1) * cos_w0 + alpha2
        return BiQuad(
            b0=(a * ((a + 1) + (a - 1) * cos_w0 + alpha2)) / a0,
            b1=(-2 * a * ((a - 1) + (a + 1) * cos_w0)) / a0,
            b2=(a * ((a + 1) + (a - 1) * cos_w0 - alpha2)) / a0,
            a1=(2 * ((a - 1) - (a + 1) * cos_w0)) / a0,
            a2=((a + 1) - (a - 1) * cos_w0 - alpha2) / a0,
        )

    if t == FilterType.ALL_PASS:
        w0 = 2 * math.pi * f.f / rate
        cos_w0 = math.cos(w0)
        alpha = math.sin(w0) * 0.5 / f.q
        a0 = 1 + alpha
        b0 = (1 - alpha) / a0
        b1 = (-2 * cos_w0) / a0
        return BiQuad(b0=b0, b1=b1, b2=1.0, a1=b1, a2=b0)

    raise UnsupportedFilterError(f"filter type {t!r} has no biquad representation")