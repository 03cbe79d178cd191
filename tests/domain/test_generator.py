# tests/domain/test_generator.py
from taxi_park.config.models import GeneratorModel
from taxi_park.domain.generator import generate_park
from taxi_park.runtime.rng import RNGRegistry


def _gen(cfg: GeneratorModel, seed: int = 123):
    return generate_park(cfg, rng_registry=RNGRegistry(seed, scenario="gen"))


def test_same_seed_same_park():
    cfg = GeneratorModel(trips=50)
    assert _gen(cfg) == _gen(cfg)
    assert _gen(cfg, seed=1) != _gen(cfg, seed=2)


def test_park_shape_follows_config():
    cfg = GeneratorModel(drivers=4, passengers=6, trips=80, max_passengers=3, max_duration=25)
    park = _gen(cfg)
    assert len(park.all_drivers) == 4
    assert len(park.all_passengers) == 6
    assert len(park.trips) == 80
    for t in park.trips:
        assert t.driver in park.all_drivers
        assert t.passengers <= park.all_passengers
        assert len(t.passengers) <= 3
        assert 0 <= t.duration <= 25
        assert t.cost >= 0


def test_discount_probability_extremes():
    never = _gen(GeneratorModel(trips=40, discount_p=0.0))
    assert not any(t.discounted for t in never.trips)

    always = _gen(GeneratorModel(trips=40, discount_p=1.0, discounts=[0.25, 0.5]))
    assert all(t.discount in (0.25, 0.5) for t in always.trips)


def test_discount_settings_do_not_move_durations():
    a = _gen(GeneratorModel(trips=30, discount_p=0.0))
    b = _gen(GeneratorModel(trips=30, discount_p=0.9))
    assert [t.duration for t in a.trips] == [t.duration for t in b.trips]
    assert [t.driver for t in a.trips] == [t.driver for t in b.trips]


def test_empty_park():
    park = _gen(GeneratorModel(drivers=0, passengers=0, trips=0))
    assert park.trips == ()
    assert not park.all_drivers and not park.all_passengers
