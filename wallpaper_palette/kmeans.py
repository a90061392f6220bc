"""
K-means clustering of sample colors with k-means++ seeding.
"""

import logging

import numpy as np
from sklearn.cluster import kmeans_plusplus
from sklearn.utils import check_random_state

from .color import Color

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 20


def _as_array(samples):
    return np.asarray(samples, dtype=np.float64).reshape(-1, 3)


def kmeans_plus_plus_init(samples, k, random_state=None):
    """Pick k starting centroids, spread out by squared-distance weighting.

    The first centroid is drawn uniformly; each later one is drawn with
    probability proportional to its squared distance from the nearest
    centroid chosen so far.
    """
    centers, _ = kmeans_plusplus(
        _as_array(samples),
        n_clusters=k,
        random_state=check_random_state(random_state),
        n_local_trials=1,
    )
    return centers


def assign(pixels, centroids):
    """Index of the nearest centroid for every pixel; ties go to the lowest index."""
    distances = ((pixels[:, np.newaxis, :] - centroids[np.newaxis, :, :]) ** 2).sum(axis=2)
    return distances.argmin(axis=1)


def update(pixels, assignments, centroids):
    """Mean of each cluster's members. Empty clusters keep their old centroid."""
    k = len(centroids)
    counts = np.bincount(assignments, minlength=k)
    sums = np.zeros_like(centroids)
    np.add.at(sums, assignments, pixels)

    updated = centroids.copy()
    filled = counts > 0
    updated[filled] = sums[filled] / counts[filled, np.newaxis]
    return updated


def kmeans(samples, k, max_iterations=MAX_ITERATIONS, random_state=None):
    """
    Cluster colors into k groups and return one centroid per group.

    Args:
        samples: Sequence of Color
        k: Number of clusters
        max_iterations: Cap on Lloyd refinement rounds
        random_state: None, an int seed, or a numpy RandomState

    Returns:
        list of exactly k Color centroids (unordered). With k or fewer
        samples the samples themselves are returned.
    """
    if len(samples) <= k:
        return list(samples)

    pixels = _as_array(samples)
    centroids = kmeans_plus_plus_init(pixels, k, random_state=random_state)
    assignments = np.zeros(len(pixels), dtype=np.intp)

    for iteration in range(max_iterations):
        nearest = assign(pixels, centroids)
        if np.array_equal(nearest, assignments):
            logger.debug("k-means converged after %d iterations", iteration)
            break
        assignments = nearest
        centroids = update(pixels, assignments, centroids)
    else:
        logger.debug("k-means stopped at the %d iteration cap", max_iterations)

    return [Color(*row) for row in centroids.tolist()]
