"""Store configuration.

Settings live in the ``[simplestore]`` table of a TOML file::

    [simplestore]
    root = "/var/lib/simplestore"
    operator_id = "8c1f..."
    account = "default"
    pay_type = "onchain"      # "none", "onchain" or "ln"
    ship_charge = 4.50

``SIMPLESTORE_ROOT`` overrides ``root`` so the same file can be reused
across environments.
"""

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path

from simplestore.order.order import PayType


@dataclass(frozen=True)
class StoreConfig:
    """Settings for a single store instance."""

    root: Path
    operator_id: str = ""
    account: str = "default"
    pay_type: PayType = PayType.NONE
    ship_charge: float = 0.0
    base_currency: str = "USD"
    settlement_currency: str = "DCR"
    invoice_validity_minutes: int = 60

    def __post_init__(self):
        if self.ship_charge < 0:
            raise ValueError(f"ship_charge must not be negative: {self.ship_charge}")


def _parse_pay_type(value) -> PayType:
    if isinstance(value, PayType):
        return value
    try:
        return PayType(str(value).lower())
    except ValueError:
        valid = ", ".join(pt.value for pt in PayType)
        raise ValueError(f"Unknown pay_type {value!r} (expected one of: {valid})") from None


def config_from_dict(data: dict, base_dir: Path | None = None) -> StoreConfig:
    """Build a StoreConfig from a plain mapping (the parsed TOML table)."""
    if "root" not in data:
        raise ValueError("Store configuration requires a 'root' directory")

    root = Path(data["root"]).expanduser()
    if not root.is_absolute() and base_dir is not None:
        root = base_dir / root

    return StoreConfig(
        root=root,
        operator_id=str(data.get("operator_id", "")),
        account=str(data.get("account", "default")),
        pay_type=_parse_pay_type(data.get("pay_type", PayType.NONE.value)),
        ship_charge=float(data.get("ship_charge", 0.0)),
        base_currency=str(data.get("base_currency", "USD")),
        settlement_currency=str(data.get("settlement_currency", "DCR")),
        invoice_validity_minutes=int(data.get("invoice_validity_minutes", 60)),
    )


def load_config(path: str | os.PathLike) -> StoreConfig:
    """Load the ``[simplestore]`` table from a TOML file.

    Relative ``root`` paths are resolved against the config file's directory.
    """
    path = Path(path)
    with path.open("rb") as f:
        document = tomllib.load(f)

    config = config_from_dict(document.get("simplestore", {}), base_dir=path.parent)

    env_root = os.getenv("SIMPLESTORE_ROOT")
    if env_root:
        config = replace(config, root=Path(env_root).expanduser())
    return config
