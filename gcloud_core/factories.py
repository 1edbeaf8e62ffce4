"""Explicit registry of service and RPC factories.

Callers register alternative factories for an options class at startup;
options classes fall back to their own hard-coded defaults otherwise.
A factory is any callable taking the options object.
"""
import threading

_LOCK = threading.Lock()
_SERVICE_FACTORIES = {}
_RPC_FACTORIES = {}


def register_service_factory(options_cls, factory):
    with _LOCK:
        _SERVICE_FACTORIES[options_cls] = factory


def register_rpc_factory(options_cls, factory):
    with _LOCK:
        _RPC_FACTORIES[options_cls] = factory


def _lookup(registry, options_cls):
    for cls in options_cls.__mro__:
        factory = registry.get(cls)
        if factory is not None:
            return factory
    return None


def service_factory_for(options_cls):
    return _lookup(_SERVICE_FACTORIES, options_cls)


def rpc_factory_for(options_cls):
    return _lookup(_RPC_FACTORIES, options_cls)


def clear():
    with _LOCK:
        _SERVICE_FACTORIES.clear()
        _RPC_FACTORIES.clear()
