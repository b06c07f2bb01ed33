"""
Index-set get/set for FastMatrix.

This module defines `MatrixMixinSubset`, which reads or replaces the region
selected by an `IIndex` (arbitrary per-dimension coordinate sets).

Algorithm
---------
The selected region is resolved once into a copy plan: the start offsets of
contiguous runs of equal length. With ``r`` index dimensions the run length is
the plane size of dimension ``r - 1`` (the product of the trailing shape beyond
the index rank). The plan is built recursively: at index dimension ``d``, each
selected coordinate ``c`` advances the base offset by ``c * plane[d]``; once
every index dimension is consumed the base offset is recorded as a run.

- get: runs are gathered source -> destination in plan order
- set: runs are scattered destination -> source in plan order

The whole plan (and therefore every bounds check) is built before any write,
so a failed `subset` write leaves the matrix unchanged.
"""

from __future__ import annotations

import logging
from abc import ABC
from typing import Any, List, Tuple

import numpy as np

from .....domain._errors import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidArgumentTypeError,
)
from .....domain._index import IIndex
from ..._shape_indexer import is_integer
from ..._normalize import flatten_values
from ....dtype._conversion import coerce

logger = logging.getLogger(__name__)


class MatrixMixinSubset(ABC):
    """
    Mixin implementing `subset` (index-set addressing) on `FastMatrix`.
    """

    def subset(self, index: IIndex, replacement: Any = None) -> Any:
        """
        Get a subset of the matrix, or replace a subset of the matrix.

        Parameters
        ----------
        index : IIndex
            Which values to get or replace.
        replacement : Any, optional
            Values used for replacement: a scalar, nested sequence, array, or
            matrix whose flattened length equals the selected region. ``None``
            means get; ``0`` is a valid replacement.

        Returns
        -------
        Any
            On get, a new matrix of shape
            ``index.size() + shape[len(index.size()):]`` holding a copy of the
            region, or a bare element when ``index.is_scalar()`` and the region
            is a single element. A selector that is scalar in every dimension
            it covers but covers fewer dimensions than the matrix rank still
            addresses a region, so it returns a matrix of shape
            ``[1, ..., 1] + shape[len(index.size()):]``; a selector scalar in
            all matrix dimensions always returns a bare element, never a
            single-element matrix. On replace, this matrix.

        Raises
        ------
        InvalidArgumentTypeError
            If `index` is not an index selector.
        DimensionMismatchError
            If the index rank exceeds the matrix rank, a selected coordinate
            is ``>=`` its dimension, or the replacement length differs from
            the selected region.
        """
        if not isinstance(index, IIndex):
            raise InvalidArgumentTypeError("Invalid index")

        if replacement is not None:
            return self._set_subset(index, replacement)

        result = self._get_subset(index)
        # a scalar selector shorter than the matrix rank still spans a region
        if index.is_scalar() and len(result._buffer) == 1:
            return result._buffer[0].item()
        return result

    def _subset_plan(self, index: IIndex) -> Tuple[List[int], List[int], int]:
        """
        Resolve an index into ``(result_shape, run_starts, run_length)``.
        """
        selection = index.to_array()
        shape = self._shape
        if len(selection) > len(shape):
            raise DimensionMismatchError(len(selection), len(shape), ">")

        planes = self._indexer.plane_sizes
        result_shape = [len(coords) for coords in selection] + list(
            shape[len(selection) :]
        )
        run = planes[len(selection) - 1] if selection else len(self._buffer)

        starts: List[int] = []

        def walk(dim: int, base: int) -> None:
            if dim == len(selection):
                starts.append(base)
                return
            for c in selection[dim]:
                if not is_integer(c):
                    raise InvalidArgumentTypeError(
                        f"Index must be an integer (value: {c!r})"
                    )
                if c < 0:
                    raise IndexOutOfRangeError(int(c), 0, shape[dim])
                if c >= shape[dim]:
                    raise DimensionMismatchError(int(c), shape[dim], ">=")
                walk(dim + 1, base + int(c) * planes[dim])

        walk(0, 0)
        return result_shape, starts, run

    def _get_subset(self, index: IIndex) -> Any:
        result_shape, starts, run = self._subset_plan(index)

        if starts and run:
            gather = (
                np.asarray(starts, dtype=np.intp)[:, None]
                + np.arange(run, dtype=np.intp)[None, :]
            ).ravel()
            data = self._buffer[gather]
        else:
            data = self._buffer[:0].copy()

        return type(self)._from_buffer(data, result_shape, self._dtype)

    def _set_subset(self, index: IIndex, replacement: Any) -> Any:
        _, starts, run = self._subset_plan(index)

        values = coerce(flatten_values(replacement), self._dtype)
        expected = len(starts) * run
        if values.size != expected:
            raise DimensionMismatchError(int(values.size), expected)

        buf = self._buffer
        for k, start in enumerate(starts):
            buf[start : start + run] = values[k * run : (k + 1) * run]

        logger.debug(
            "subset write: %d run(s) of %d element(s) into shape %s",
            len(starts),
            run,
            self._shape,
        )
        return self
