"""Console presentation of emitter registries."""

from .presenter import RegistryPresenter

__all__ = ['RegistryPresenter']
