import pytest

from skbridge import CompositeEstimator, CyclicParameterGraph, InvalidParameter, get_params, set_params, wrap
from tests.fixtures.estimators import Bagged, Chain, RecordingForeign, Scaler, ThresholdClassifier, Wrapper, make_chain


def test_shallow_params_return_sub_estimators_as_is() -> None:
    chain = make_chain()
    params = chain.get_params(deep=False)
    assert set(params) == {"scaler", "clf", "verbose"}
    assert params["scaler"] is chain.scaler


def test_deep_params_flatten_descendants() -> None:
    chain = make_chain(mean=0.0, C=1.0)
    params = get_params(chain, deep=True)
    assert params["scaler__mean"] == 0.0
    assert params["scaler__scale"] == 1.0
    assert params["clf__C"] == 1.0
    assert params["clf__threshold"] == 0.0
    assert params["verbose"] is False


def test_deep_params_span_multiple_levels() -> None:
    outer = Wrapper(inner=Wrapper(inner=Scaler(mean=3.0)))
    params = outer.get_params(deep=True)
    assert params["inner__inner__mean"] == 3.0
    assert isinstance(params["inner__inner"], Scaler)


def test_set_nested_param_matches_direct_call() -> None:
    chain = make_chain()
    direct = ThresholdClassifier(C=1.0)
    direct.set_params(C=5)

    chain.set_params(clf__C=5)

    assert chain.clf.get_params(deep=False) == direct.get_params(deep=False)
    assert chain.verbose is False
    assert isinstance(chain.scaler, Scaler)


def test_pipeline_scenario() -> None:
    pipeline = make_chain(mean=0.0, C=1.0)
    returned = set_params(pipeline, clf__C=10)
    assert returned is pipeline
    deep = get_params(pipeline, deep=True)
    assert deep["clf__C"] == 10
    assert deep["scaler__mean"] == 0.0


def test_single_segment_roundtrip() -> None:
    chain = make_chain()
    replacement = Scaler(mean=2.0)
    chain.set_params(verbose=True, scaler=replacement)
    params = chain.get_params(deep=False)
    assert params["verbose"] is True
    assert params["scaler"] is replacement


def test_three_level_path_forwards_remainder() -> None:
    outer = Wrapper(inner=Wrapper(inner=Scaler()))
    outer.set_params(inner__inner__scale=4.0)
    assert outer.inner.inner.scale == 4.0


def test_empty_set_params_skips_param_lookup(monkeypatch) -> None:
    chain = make_chain()

    def _boom(*args, **kwargs):
        raise AssertionError("get_params should not run")

    monkeypatch.setattr(chain, "get_params", _boom)
    assert chain.set_params() is chain


def test_empty_set_params_makes_no_foreign_calls() -> None:
    foreign = RecordingForeign()
    chain = Chain(scaler=Scaler(), clf=wrap(foreign))
    chain.set_params()
    assert foreign.calls == []


def test_unknown_prefix_raises_and_leaves_tree_untouched() -> None:
    chain = make_chain(mean=1.0, C=2.0)
    before = chain.get_params(deep=True)

    with pytest.raises(InvalidParameter) as excinfo:
        chain.set_params(clf__C=99, unknown__x=1)

    assert excinfo.value.name == "unknown"
    assert excinfo.value.estimator is chain
    assert "unknown" in str(excinfo.value)
    assert chain.get_params(deep=True) == before


def test_invalid_nested_segment_is_named_precisely() -> None:
    outer = Wrapper(inner=Wrapper(inner=Scaler()))
    with pytest.raises(InvalidParameter) as excinfo:
        outer.set_params(inner__inner__bogus=1)
    assert excinfo.value.name == "bogus"
    assert isinstance(excinfo.value.estimator, Scaler)


def test_unknown_single_segment_raises() -> None:
    chain = make_chain()
    with pytest.raises(InvalidParameter) as excinfo:
        chain.set_params(colour="red")
    assert excinfo.value.name == "colour"
    assert not hasattr(chain, "colour")


def test_leaf_rejects_unknown_param() -> None:
    scaler = Scaler()
    with pytest.raises(InvalidParameter):
        scaler.set_params(mean=1.0, median=2.0)
    assert scaler.mean == 0.0


def test_nested_keys_are_forwarded_one_call_each(monkeypatch) -> None:
    chain = make_chain()
    received = []
    original = chain.clf.set_params

    def _spy(**params):
        received.append(params)
        return original(**params)

    monkeypatch.setattr(chain.clf, "set_params", _spy)
    chain.set_params(clf__C=3, clf__threshold=0.5)

    assert received == [{"C": 3}, {"threshold": 0.5}]
    assert chain.clf.C == 3
    assert chain.clf.threshold == 0.5


def test_nested_foreign_leaf_receives_single_set_params() -> None:
    foreign = RecordingForeign(alpha=1.0)
    chain = Chain(scaler=Scaler(), clf=wrap(foreign))

    chain.set_params(clf__alpha=0.25)

    assert foreign.alpha == 0.25
    set_calls = [call for call in foreign.calls if call[0] == "set_params"]
    assert set_calls == [("set_params", (), {"alpha": 0.25})]


def test_raw_foreign_sub_estimator_is_expanded() -> None:
    chain = Chain(scaler=Scaler(), clf=RecordingForeign(alpha=2.0))
    assert chain.get_params(deep=True)["clf__alpha"] == 2.0
    chain.set_params(clf__alpha=3.0)
    assert chain.clf.alpha == 3.0


def test_cycle_is_detected() -> None:
    first = Wrapper()
    second = Wrapper(inner=first)
    first.inner = second

    with pytest.raises(CyclicParameterGraph) as excinfo:
        first.get_params(deep=True)
    assert excinfo.value.path == ["inner", "inner"]


def test_cycle_blocks_set_params_before_mutation() -> None:
    node = Wrapper()
    node.inner = node
    with pytest.raises(CyclicParameterGraph):
        node.set_params(inner=None)
    assert node.inner is node


def test_shared_sub_estimator_is_not_a_cycle() -> None:
    shared = Scaler(mean=1.0)
    chain = Chain(scaler=shared, clf=Wrapper(inner=shared))
    params = chain.get_params(deep=True)
    assert params["scaler__mean"] == 1.0
    assert params["clf__inner__mean"] == 1.0


def test_composite_without_sub_estimators() -> None:
    class Flat(CompositeEstimator):
        def __init__(self, a=1, b=2):
            self.a = a
            self.b = b

    flat = Flat()
    assert flat.set_params() is flat
    flat.set_params(a=10)
    assert flat.get_params(deep=True) == {"a": 10, "b": 2}


def test_repr_handles_cycles() -> None:
    node = Wrapper()
    node.inner = node
    assert repr(node) == "Wrapper(inner=Wrapper(...))"


def test_deep_path_through_plain_estimator_is_applied() -> None:
    chain = Chain(scaler=Scaler(), clf=Bagged(base=Scaler()))

    chain.set_params(verbose=True, clf__base__mean=7.0)

    assert chain.verbose is True
    assert chain.clf.base.mean == 7.0
    assert chain.get_params(deep=True)["clf__base__mean"] == 7.0


def test_plain_estimator_sets_nested_keys_itself() -> None:
    bagged = Bagged(base=Scaler())
    assert bagged.set_params(n_rounds=3, base__scale=2.0) is bagged
    assert bagged.n_rounds == 3
    assert bagged.base.scale == 2.0


def test_bad_segment_below_plain_estimator_mutates_nothing() -> None:
    chain = Chain(scaler=Scaler(), clf=Bagged(base=Scaler()))

    with pytest.raises(InvalidParameter) as excinfo:
        chain.set_params(verbose=True, clf__base__median=7.0)

    assert excinfo.value.name == "median"
    assert excinfo.value.estimator is chain.clf.base
    assert chain.verbose is False


def test_nested_key_reaches_replacement_sub_estimator() -> None:
    chain = make_chain(C=1.0)
    old = chain.clf
    replacement = ThresholdClassifier(C=1.0)

    chain.set_params(clf__C=10, clf=replacement)

    assert chain.clf is replacement
    assert replacement.C == 10
    assert old.C == 1.0


def test_nested_key_is_validated_against_replacement() -> None:
    chain = make_chain()
    old = chain.clf

    with pytest.raises(InvalidParameter) as excinfo:
        chain.set_params(clf=Scaler(), clf__C=10)

    assert excinfo.value.name == "C"
    assert isinstance(excinfo.value.estimator, Scaler)
    assert chain.clf is old
    assert old.C == 1.0
