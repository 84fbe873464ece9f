"""Default location used when neither the config nor the caller supplies one."""

from solunar.config.schema import LocationConfig

DEFAULT_LOCATION = LocationConfig(
    name="Novi Sad",
    latitude=45.2671,
    longitude=19.8335,
)
