"""
Finite-difference stencils.

Each stencil has the signature ``stencil(f, x, h) -> float`` and evaluates
f only at offsets that are integer multiples of h. First-order stencils
approximate f'(x); the ``second_*`` stencils approximate f''(x).
"""

from __future__ import annotations

from typing import Callable

Function = Callable[[float], float]
Stencil = Callable[[Function, float, float], float]


# --- First order, central ---

def central_3point(f: Function, x: float, h: float) -> float:
    return (f(x + h) - f(x - h)) / (2 * h)


def central_5point(f: Function, x: float, h: float) -> float:
    return (-f(x + 2 * h) + 8 * f(x + h) - 8 * f(x - h) + f(x - 2 * h)) / (12 * h)


def central_richardson(f: Function, x: float, h: float) -> float:
    # Richardson extrapolation of the 3-point formula at h and 2h
    return (4.0 * (f(x + h) - f(x - h)) - 0.5 * (f(x + 2 * h) - f(x - 2 * h))) / (6 * h)


# --- First order, forward ---

def forward_2point(f: Function, x: float, h: float) -> float:
    return (f(x + h) - f(x)) / h


def forward_3point(f: Function, x: float, h: float) -> float:
    return (-f(x + 2 * h) + 4 * f(x + h) - 3 * f(x)) / (2 * h)


def forward_richardson(f: Function, x: float, h: float) -> float:
    d1, d2, d3, d4 = (f(x + k * h) for k in (1, 2, 3, 4))
    return (22.0 * (d4 - d3) - 62.0 * (d3 - d2) + 52.0 * (d2 - d1)) / (12 * h)


# --- First order, backward ---

def backward_2point(f: Function, x: float, h: float) -> float:
    return (f(x) - f(x - h)) / h


def backward_3point(f: Function, x: float, h: float) -> float:
    return (3 * f(x) - 4 * f(x - h) + f(x - 2 * h)) / (2 * h)


def backward_richardson(f: Function, x: float, h: float) -> float:
    d1, d2, d3, d4 = (f(x - k * h) for k in (1, 2, 3, 4))
    return (22.0 * (d4 - d3) - 62.0 * (d3 - d2) + 52.0 * (d2 - d1)) / -(12 * h)


# --- Second order ---

def second_central_3point(f: Function, x: float, h: float) -> float:
    return (f(x + h) - 2 * f(x) + f(x - h)) / h**2


def second_central_5point(f: Function, x: float, h: float) -> float:
    return (
        -f(x + 2 * h) + 16 * f(x + h) - 30 * f(x) + 16 * f(x - h) - f(x - 2 * h)
    ) / (12 * h**2)


def second_forward_3point(f: Function, x: float, h: float) -> float:
    return (f(x + 2 * h) - 2 * f(x + h) + f(x)) / h**2


def second_forward_4point(f: Function, x: float, h: float) -> float:
    return (-f(x + 3 * h) + 4 * f(x + 2 * h) - 5 * f(x + h) + 2 * f(x)) / h**2


def second_backward_3point(f: Function, x: float, h: float) -> float:
    return (f(x) - 2 * f(x - h) + f(x - 2 * h)) / h**2


def second_backward_4point(f: Function, x: float, h: float) -> float:
    return (2 * f(x) - 5 * f(x - h) + 4 * f(x - 2 * h) - f(x - 3 * h)) / h**2


STENCILS: dict[str, Stencil] = {
    'central_3point': central_3point,
    'central_5point': central_5point,
    'central_richardson': central_richardson,
    'forward_2point': forward_2point,
    'forward_3point': forward_3point,
    'forward_richardson': forward_richardson,
    'backward_2point': backward_2point,
    'backward_3point': backward_3point,
    'backward_richardson': backward_richardson,
    'second_central_3point': second_central_3point,
    'second_central_5point': second_central_5point,
    'second_forward_3point': second_forward_3point,
    'second_forward_4point': second_forward_4point,
    'second_backward_3point': second_backward_3point,
    'second_backward_4point': second_backward_4point,
}
