from typing import Generic, Callable, TypeVar, Hashable, ClassVar


K = TypeVar("K", bound=Hashable)
T = TypeVar("T")
TypeMap = dict[K, type[T]]


class TypeAbstractFactory(Generic[K, T]):
    """
    Keyed registry of implementation types.

    Each subclass gets its own registry, so transport engines and middleware
    can register under the same enum values without colliding.
    """

    _registry: ClassVar[TypeMap] = {}

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        cls._registry = {}

    @classmethod
    def register(cls, key: K) -> Callable[[type[T]], type[T]]:
        """Decorator registering `impl` under `key`."""
        def wrapper(impl: type[T]) -> type[T]:
            cls._registry[key] = impl
            return impl

        return wrapper

    @classmethod
    def list_keys(cls) -> list[K]:
        return list(cls._registry.keys())

    @classmethod
    def get(cls, key: K) -> type[T]:
        try:
            return cls._registry[key]
        except KeyError:
            raise KeyError(
                f"{cls.__name__} has no implementation registered for {key!r}; "
                f"known keys: {cls.list_keys()}"
            ) from None

    @classmethod
    def create(cls, key: K, *args, **kwargs) -> T:
        return cls.get(key)(*args, **kwargs)
