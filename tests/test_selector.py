import logging

import numpy as np
import pandas as pd
import pytest
from sklearn.base import clone
from sklearn.pipeline import Pipeline
from sklearn.svm import SVC

from featrank import InvalidParameterError, TooManyClassesError, TwoClassRankSelector


@pytest.fixture
def samples():
    # sklearn orientation: (n_samples, n_features); columns 2 and 4 are informative
    rng = np.random.default_rng(0)
    y = np.repeat([0, 1], 30)
    X = rng.normal(size=(60, 6))
    X[:, 2] += 3.0 * y
    X[:, 4] -= 3.0 * y
    return X, y


@pytest.mark.parametrize("criterion", ["fisher_score", "discriminating_coefficient"])
def test_selects_informative_columns(samples, criterion):
    X, y = samples
    sel = TwoClassRankSelector(criterion=criterion, k=2).fit(X, y)
    assert sel.get_support(indices=True).tolist() == [2, 4]
    assert set(sel.ranking_[:2].tolist()) == {2, 4}
    assert sel.transform(X).shape == (60, 2)
    assert sel.scores_.shape == (6,)
    assert sel.classes_.tolist() == [0, 1]


def test_scores_are_in_original_column_order(samples):
    X, y = samples
    sel = TwoClassRankSelector(k="all").fit(X, y)
    assert sel.get_support().all()
    best = int(np.argmax(sel.scores_))
    assert best == sel.ranking_[0]


def test_pipeline_with_svm(samples):
    X, y = samples
    clf = Pipeline([("select", TwoClassRankSelector(k=2)), ("svm", SVC(kernel="linear"))])
    clf.fit(X, y)
    assert clf.score(X, y) > 0.9


def test_large_k_is_clamped(samples, caplog):
    X, y = samples
    with caplog.at_level(logging.WARNING, logger="featrank.selector"):
        sel = TwoClassRankSelector(k=100).fit(X, y)
    assert sel.k_ == 6
    assert sel.get_support().all()
    assert any("keeping all features" in r.getMessage() for r in caplog.records)


@pytest.mark.parametrize("k", [0, -2, "some"])
def test_invalid_k(samples, k):
    X, y = samples
    with pytest.raises(InvalidParameterError):
        TwoClassRankSelector(k=k).fit(X, y)


def test_multiclass_target_rejected(samples):
    X, _ = samples
    y = np.arange(60) % 3
    with pytest.raises(TooManyClassesError):
        TwoClassRankSelector(k=2).fit(X, y)


def test_dataframe_feature_names_out(samples):
    X, y = samples
    df = pd.DataFrame(X, columns=[f"f{i}" for i in range(6)])
    sel = TwoClassRankSelector(k=2).fit(df, y)
    assert sel.get_feature_names_out().tolist() == ["f2", "f4"]


def test_clone_keeps_params():
    sel = TwoClassRankSelector(criterion="dc", k=5, zero_variance="raise")
    params = clone(sel).get_params()
    assert params == {"criterion": "dc", "k": 5, "zero_variance": "raise"}
