"""lsdvol: список томов, смонтированных в Docker контейнер."""

__version__ = "0.2.0"
