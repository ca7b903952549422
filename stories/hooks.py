"""Registro de filtros no estilo ``apply_filters``.

Cada callback recebe o valor atual e os argumentos de contexto e devolve o
novo valor. Ordem: prioridade crescente, depois ordem de registro.
"""
from __future__ import annotations

import itertools

_filters: dict[str, list[tuple[int, int, object]]] = {}
_seq = itertools.count()


def add_filter(name: str, callback=None, priority: int = 10):
    if callback is None:
        # Uso como decorator: @add_filter('nome')
        def decorator(func):
            add_filter(name, func, priority)
            return func
        return decorator

    _filters.setdefault(name, []).append((priority, next(_seq), callback))
    return callback


def remove_filter(name: str, callback) -> bool:
    entries = _filters.get(name, [])
    kept = [e for e in entries if e[2] is not callback]
    if len(kept) == len(entries):
        return False
    if kept:
        _filters[name] = kept
    else:
        _filters.pop(name, None)
    return True


def has_filter(name: str) -> bool:
    return bool(_filters.get(name))


def apply_filters(name: str, value, *args):
    for _, _, callback in sorted(_filters.get(name, []), key=lambda e: (e[0], e[1])):
        value = callback(value, *args)
    return value


def reset_filters(name: str | None = None) -> None:
    if name is None:
        _filters.clear()
    else:
        _filters.pop(name, None)
