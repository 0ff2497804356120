from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

from prev_iter import LookbackIterator

OVERLAP = 16


def stream_chunks(signal: np.ndarray, frames_per_chunk: int) -> Iterator[np.ndarray]:
    for start in range(0, len(signal), frames_per_chunk):
        yield signal[start : start + frames_per_chunk].copy()


def padded_chunks(signal: np.ndarray, frames_per_chunk: int) -> Iterator[np.ndarray]:
    """Yield each chunk with a preroll from the previous chunk and a postroll from the next one."""
    it = LookbackIterator(stream_chunks(signal, frames_per_chunk))
    for chunk in it:
        preroll = np.empty(0, dtype=signal.dtype)
        postroll = np.empty(0, dtype=signal.dtype)
        prv = it.peek_prev()
        nxt = it.peek()
        if prv is not None:
            preroll = prv[-OVERLAP:]
        if nxt is not None:
            postroll = nxt[:OVERLAP]
        yield np.concatenate([preroll, chunk, postroll])


@pytest.mark.parametrize("frames_per_chunk", [32, 50, 100, 1000])
def test_padded_chunks_overlap_neighbours(frames_per_chunk):
    signal = np.arange(1000)
    for idx, padded in enumerate(padded_chunks(signal, frames_per_chunk)):
        start = idx * frames_per_chunk
        end = min(start + frames_per_chunk, len(signal))
        lo = max(0, start - OVERLAP)
        hi = min(len(signal), end + OVERLAP)
        np.testing.assert_array_equal(padded, signal[lo:hi])


def test_mutating_returned_chunk_leaves_cache_untouched():
    signal = np.arange(30, dtype=np.float32)
    it = LookbackIterator(stream_chunks(signal, 10))

    chunk = it.advance()
    chunk[:] = -1
    it.advance()
    np.testing.assert_array_equal(it.prev(), signal[:10])

    prev = it.prev()
    prev *= 0
    np.testing.assert_array_equal(it.peek_prev(), signal[:10])


def test_last_chunk_is_frozen_after_exhaustion():
    signal = np.arange(25)
    it = LookbackIterator(stream_chunks(signal, 10))
    assert len(list(it)) == 3
    np.testing.assert_array_equal(it.prev(), signal[20:])
    assert it.advance() is None
    np.testing.assert_array_equal(it.prev(), signal[20:])
