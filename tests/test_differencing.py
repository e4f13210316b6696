import sys
import os

# Add project root to Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.append(project_root)

import pytest
import numpy as np
from diagnostics import difference, integrate, acf
from simulation import unit_root, draw
from simulation.exceptions import InvalidParameter

def test_difference_of_random_walk_recovers_noise():
    path = unit_root(300, seed=5)
    np.testing.assert_allclose(difference(path), draw(5, 300)[1:], atol=1e-12)

def test_difference_orders():
    values = np.array([1.0, 4.0, 9.0, 16.0, 25.0])
    np.testing.assert_array_equal(difference(values), [3.0, 5.0, 7.0, 9.0])
    np.testing.assert_array_equal(difference(values, 2), [2.0, 2.0, 2.0])
    np.testing.assert_array_equal(difference(values, 0), values)

def test_integrate_inverts_difference():
    values = np.array([0.5, -1.0, 2.0, 0.25])
    np.testing.assert_allclose(difference(integrate(values)), values[1:])
    np.testing.assert_allclose(integrate(values, 2), np.cumsum(np.cumsum(values)))
    assert len(integrate(values, 3)) == len(values)

def test_differencing_removes_persistence():
    """A random walk is highly autocorrelated, its differences are not"""
    path = unit_root(2000, seed=9)
    assert acf(path, 1)[1] > 0.9
    assert abs(acf(difference(path), 1)[1]) < 0.1

@pytest.mark.parametrize("d", [-1, 5, 6])
def test_invalid_difference_order(d):
    with pytest.raises(InvalidParameter):
        difference(np.arange(5.0), d)

def test_invalid_integration_order():
    with pytest.raises(InvalidParameter):
        integrate(np.arange(5.0), -1)

if __name__ == '__main__':
    pytest.main([__file__])
