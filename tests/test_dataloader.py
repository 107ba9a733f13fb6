import pytest

from tinynet.dataloader import DataLoader
from tinynet.rng import set_seed
from tinynet.tensor import Tensor

ROWS = 7


def _data():
    x = Tensor((ROWS, 2))
    x.data = [float(v) for i in range(ROWS) for v in (i, 10 * i)]
    y = Tensor((ROWS, 1))
    y.data = [float(i) for i in range(ROWS)]
    return x, y


def test_batches_cover_all_rows():
    x, y = _data()
    loader = DataLoader(x, y, 3)
    sizes = [bx.shape[0] for bx, _ in loader]
    assert len(sizes) == loader.n_batches()
    assert sum(sizes) == ROWS
    assert all(size == 3 for size in sizes[:-1])
    assert 0 < sizes[-1] <= 3


def test_exact_division_has_no_short_batch():
    x, y = _data()
    loader = DataLoader(x, y, ROWS)
    assert loader.n_batches() == 1
    bx, by = loader.get_batch(0)
    assert bx == x
    assert by == y


def test_unshuffled_batch_keeps_order():
    x, y = _data()
    bx, by = DataLoader(x, y, 2).get_batch(1)
    assert bx.data == x.data[4:8]
    assert by.data == y.data[2:4]


def test_shuffle_is_permutation_with_pairs_kept():
    set_seed(42)
    x, y = _data()
    loader = DataLoader(x, y, 3)
    loader.shuffle()
    assert sorted(loader.indices) == list(range(ROWS))
    seen = []
    for bx, by in loader:
        for r in range(bx.shape[0]):
            assert bx[r, 0] == by[r, 0]
            assert bx[r, 1] == 10 * by[r, 0]
            seen.append(by[r, 0])
    assert sorted(seen) == y.data


def test_seeded_shuffle_is_reproducible():
    x, y = _data()
    set_seed(9)
    first = DataLoader(x, y, 2)
    first.shuffle()
    set_seed(9)
    second = DataLoader(x, y, 2)
    second.shuffle()
    assert first.indices == second.indices


def test_invalid_batch_size():
    x, y = _data()
    with pytest.raises(ValueError):
        DataLoader(x, y, 0)


def test_batch_index_out_of_range():
    x, y = _data()
    loader = DataLoader(x, y, 3)
    with pytest.raises(IndexError):
        loader.get_batch(loader.n_batches())