from common.config import Config, load_config


def test_defaults_without_file(tmp_path):
    assert load_config(None) == Config()
    assert load_config(str(tmp_path / "missing.yaml")) == Config()
    assert Config().pairing.epsilon == 1e-9
    assert Config().routing.default_route_name_base == "Duct"


def test_partial_override(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "pairing:\n"
        "  epsilon: 1.0e-6\n"
        "routing:\n"
        "  default_route_name_base: SA\n"
        "plot:\n",
        encoding="utf-8",
    )
    cfg = load_config(str(path))
    assert cfg.pairing.epsilon == 1e-6
    assert cfg.routing.default_route_name_base == "SA"
    assert cfg.routing.require_supply_air is True
    assert cfg.plot.dpi == 150
    assert cfg.logging.level == "INFO"


def test_empty_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(str(path)) == Config()
