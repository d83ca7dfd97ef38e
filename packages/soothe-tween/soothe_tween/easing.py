"""Easing functions for transition interpolation."""
from __future__ import annotations

import math
from typing import Callable

Easing = Callable[[float], float]

# Spring residual treated as settled (0.1% of the distance).
_SETTLE_RESIDUAL = 0.001


def linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t * t


def ease_out(t: float) -> float:
    return t * (2 - t)


def ease_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


EASINGS: dict[str, Easing] = {
    "linear": linear,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
}


def spring_curve(omega: float, zeta: float) -> tuple[float, Easing]:
    """Step response of a damped spring starting at rest.

    Returns ``(settle_seconds, curve)``; ``curve`` takes progress in [0, 1]
    scaled over ``settle_seconds`` and may overshoot 1 when underdamped.
    """
    if omega <= 0:
        raise ValueError(f"omega must be positive, got {omega}")
    if zeta <= 0:
        raise ValueError(f"zeta must be positive, got {zeta}")
    settle = -math.log(_SETTLE_RESIDUAL) / (min(zeta, 1.0) * omega)

    if zeta < 1.0:
        omega_d = omega * math.sqrt(1.0 - zeta * zeta)

        def underdamped(u: float) -> float:
            t = u * settle
            decay = math.exp(-zeta * omega * t)
            return 1.0 - decay * (
                math.cos(omega_d * t) + (zeta * omega / omega_d) * math.sin(omega_d * t)
            )

        return settle, underdamped

    def damped(u: float) -> float:
        t = u * settle
        return 1.0 - math.exp(-omega * t) * (1.0 + omega * t)

    return settle, damped


def spring(response: float, damping_fraction: float) -> tuple[float, Easing]:
    """Spring described by its period (``response``) and damping ratio."""
    if response <= 0:
        raise ValueError(f"response must be positive, got {response}")
    return spring_curve(2 * math.pi / response, damping_fraction)


def interpolating_spring(
    mass: float, stiffness: float, damping: float
) -> tuple[float, Easing]:
    """Spring described by physical mass, stiffness and damping coefficients."""
    if mass <= 0 or stiffness <= 0:
        raise ValueError("mass and stiffness must be positive")
    omega = math.sqrt(stiffness / mass)
    zeta = damping / (2 * math.sqrt(stiffness * mass))
    return spring_curve(omega, zeta)
