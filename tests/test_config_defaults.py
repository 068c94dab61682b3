from fyodor.config import load_config


def test_default_values() -> None:
    cfg = load_config(env={})
    assert cfg.schema_version == 1
    assert cfg.seed.env == "FYODOR_SEED"
    assert cfg.seed.value is None
    assert cfg.generation.max_attempts == 100
    assert cfg.generation.string_max_length == 30
    assert cfg.generation.collection_max_size == 10
    assert cfg.logging.level == "WARNING"
