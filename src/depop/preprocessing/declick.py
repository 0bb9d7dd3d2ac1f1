"""Declick — reparo de pops de amostra unica.

Cada amostra e avaliada numa janela de 5 posicoes: ela mesma (centro) e dois
vizinhos de cada lado. Com `hi` e `lo` sendo o maximo e o minimo dos 4
vizinhos (o centro fica de fora):

    d = hi - lo            (distancia)
    a = (hi + lo) / 2      (ponto medio)

Se o centro cai fora de [a - 2d, a + 2d] ele e substituido por `a`; caso
contrario e mantido. Empate exato na fronteira mantem a amostra original.

Bordas: a sequencia recebe padding de sentinelas, [max, min] antes do
inicio e [max, min] depois do fim, com max/min sendo os extremos da
representacao. As duas primeiras e as duas ultimas amostras reais sempre
tem janela completa, e os sentinelas nunca ocupam o centro.

Aritmetica:
- inteiros ate 32 bits sao avaliados em int64; inteiros de 64 bits em
  inteiros Python (precisao arbitraria). A decisao e exata e usa o ponto
  medio sem arredondamento (compara 2*centro com hi + lo +- 4d).
- o valor de substituicao inteiro e (hi + lo) / 2 arredondado half-to-even.
- floats sao avaliados em float64 e o ponto medio volta ao dtype de entrada.

Cada saida depende apenas da propria janela da entrada com padding, nunca
de outras saidas: a ordem de avaliacao das posicoes e irrelevante.
"""

from __future__ import annotations

from functools import reduce
from typing import TYPE_CHECKING

import numpy as np

from depop._types import SampleBounds
from depop.exceptions import InvalidSampleFormatError

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, DTypeLike

WINDOW_SIZE = 5
CONTEXT = WINDOW_SIZE // 2

# Multiplicador de d que define o intervalo aceito em torno do ponto medio.
_SPREAD = 2

# Valores extremos de float normalizado.
_FLOAT_BOUNDS = SampleBounds(minimum=-1.0, maximum=1.0)


def bounds_for_dtype(dtype: DTypeLike) -> SampleBounds:
    """Retorna os extremos representaveis de um dtype de amostra.

    Inteiros usam numpy.iinfo; floats usam a faixa normalizada [-1.0, 1.0].

    Raises:
        InvalidSampleFormatError: Se o dtype nao e inteiro nem float.
    """
    dt = np.dtype(dtype)
    if dt.kind in "iu":
        info = np.iinfo(dt)
        return SampleBounds(minimum=int(info.min), maximum=int(info.max))
    if dt.kind == "f":
        return _FLOAT_BOUNDS
    raise InvalidSampleFormatError(f"dtype '{dt}' nao e uma representacao de amostra")


def bounds_for_bit_depth(bits: int) -> SampleBounds:
    """Retorna os extremos de PCM com sinal de `bits` bits, alinhado a direita.

    Ex: 24 bits -> (-8388608, 8388607), para amostras de 24 bits guardadas em int32.
    """
    if not 1 <= bits <= 64:
        msg = f"Profundidade de bits fora de 1..64: {bits}"
        raise ValueError(msg)
    half = 1 << (bits - 1)
    return SampleBounds(minimum=-half, maximum=half - 1)


def to_working(samples: np.ndarray) -> np.ndarray:
    """Converte amostras para a representacao intermediaria sem overflow."""
    if samples.dtype.kind == "f":
        return samples.astype(np.float64)
    if samples.dtype.itemsize <= 4:
        return samples.astype(np.int64)
    return samples.astype(object)


def sentinels(bounds: SampleBounds, working_dtype: np.dtype) -> np.ndarray:
    """Par [max, min] usado no padding de cada borda."""
    return np.array([bounds.maximum, bounds.minimum], dtype=working_dtype)


def _half_to_even(total: np.ndarray) -> np.ndarray:
    """Calcula total / 2 arredondado half-to-even, em aritmetica inteira."""
    quotient = total // 2
    remainder = total - 2 * quotient
    return quotient + remainder * (quotient % 2)


def evaluate_windows(padded: np.ndarray) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Avalia todas as janelas de uma sequencia ja com padding.

    Args:
        padded: Amostras na representacao intermediaria (ver `to_working`),
            com CONTEXT amostras de contexto em cada ponta.

    Returns:
        Tupla (centros, mascara de pops, pontos medios), cada uma com
        len(padded) - 4 posicoes.
    """
    n = len(padded) - 2 * CONTEXT
    slots = [padded[k : k + n] for k in range(WINDOW_SIZE)]
    center = slots[CONTEXT]
    neighbors = slots[:CONTEXT] + slots[CONTEXT + 1 :]

    hi = reduce(np.maximum, neighbors)
    lo = reduce(np.minimum, neighbors)
    distance = hi - lo
    total = hi + lo

    if padded.dtype.kind == "f":
        midpoint = total / 2
        spread = _SPREAD * distance
        pops = (center > midpoint + spread) | (center < midpoint - spread)
    else:
        doubled_spread = 2 * _SPREAD * distance
        doubled_center = 2 * center
        pops = (doubled_center > total + doubled_spread) | (doubled_center < total - doubled_spread)
        midpoint = _half_to_even(total)

    return center, np.asarray(pops, dtype=bool), midpoint


def repair_padded(padded: np.ndarray, dtype: np.dtype) -> np.ndarray:
    """Repara as posicoes centrais de uma sequencia com padding.

    Retorna um array novo do dtype de saida com len(padded) - 4 amostras.
    """
    center, pops, midpoint = evaluate_windows(padded)
    return np.where(pops, midpoint, center).astype(dtype)


def _pad(samples: np.ndarray, bounds: SampleBounds) -> np.ndarray:
    work = to_working(samples)
    edge = sentinels(bounds, work.dtype)
    return np.concatenate([edge, work, edge])


def _as_channel(samples: ArrayLike) -> np.ndarray:
    source = np.asarray(samples)
    if source.ndim != 1:
        raise InvalidSampleFormatError(
            f"esperado array 1-D de um canal, recebido shape {source.shape}"
        )
    return source


def repair(samples: ArrayLike, bounds: SampleBounds | None = None) -> np.ndarray:
    """Remove pops de amostra unica de um canal.

    Args:
        samples: Sequencia 1-D de amostras de um canal. Nunca e modificada.
        bounds: Extremos da representacao. Default: derivado do dtype.

    Returns:
        Array novo com o mesmo dtype e comprimento da entrada.
    """
    source = _as_channel(samples)
    if source.size == 0:
        return source.copy()

    resolved = bounds if bounds is not None else bounds_for_dtype(source.dtype)
    return repair_padded(_pad(source, resolved), source.dtype)


def detect_pops(samples: ArrayLike, bounds: SampleBounds | None = None) -> np.ndarray:
    """Retorna mascara booleana das posicoes que `repair` substituiria."""
    source = _as_channel(samples)
    if source.size == 0:
        return np.zeros(0, dtype=bool)

    resolved = bounds if bounds is not None else bounds_for_dtype(source.dtype)
    _, pops, _ = evaluate_windows(_pad(source, resolved))
    return pops
