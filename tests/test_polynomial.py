import pytest

from dstructs.polynomial import Polynomial


@pytest.fixture
def poly_a():
    a = Polynomial()
    a.append_term(4, 3)
    a.append_term(3, 2)
    a.append_term(5, 1)
    return a


@pytest.fixture
def poly_b():
    return Polynomial([(3, 4), (1, 3), (2, 1), (1, 0)])


def test_terms_in_append_order(poly_a):
    assert list(poly_a) == [(4.0, 3), (3.0, 2), (5.0, 1)]


def test_str_format(poly_a):
    assert str(poly_a) == "  4x^3 +  3x^2 +  5x^1"


def test_sum_of_example(poly_a, poly_b):
    assert list(poly_a + poly_b) == [
        (3.0, 4),
        (5.0, 3),
        (3.0, 2),
        (7.0, 1),
        (1.0, 0),
    ]


def test_addition_is_commutative(poly_a, poly_b):
    assert list(poly_a + poly_b) == list(poly_b + poly_a)


def test_adding_empty_keeps_terms(poly_a):
    assert list(poly_a + Polynomial()) == list(poly_a)
    assert list(Polynomial() + poly_a) == list(poly_a)


def test_sum_exponents_descending(poly_a, poly_b):
    exponents = [expo for _, expo in poly_a + poly_b]
    assert exponents == sorted(exponents, reverse=True)


def test_operands_unchanged(poly_a, poly_b):
    before = list(poly_a)
    _ = poly_a + poly_b
    assert list(poly_a) == before


def test_empty_str():
    assert str(Polynomial()) == ""


def test_add_non_polynomial_raises():
    poly = Polynomial([(2, 1)])
    with pytest.raises(TypeError):
        Polynomial([(1, 0)]) + 3
    assert list(poly) == [(2.0, 1)]