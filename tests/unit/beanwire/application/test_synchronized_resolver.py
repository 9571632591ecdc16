"""Unit tests for SynchronizedResolver."""

import threading
import time

from beanwire.application.bean_map import BeanMap
from beanwire.application.class_locator import ClassLocator
from beanwire.application.resolver import Resolver, SynchronizedResolver


class SlowConnection:
    instances = 0

    def __init__(self):
        time.sleep(0.01)
        SlowConnection.instances += 1


class Repository:
    def __init__(self, *, connection):
        self.connection = connection


class TestSynchronizedResolver:
    """Test cases for the thread-safe resolver."""

    def test_is_a_resolver(self):
        """Test that SynchronizedResolver keeps the Resolver contract."""
        assert isinstance(SynchronizedResolver(BeanMap()), Resolver)

    def test_recursive_resolution_reenters_lock(self):
        """Test that dependencies resolve under the same lock without deadlock."""
        bean_map = BeanMap()
        bean_map.bean("connection", klass="SlowConnection")
        bean_map.bean("repository", klass="Repository")
        resolver = SynchronizedResolver(
            bean_map, ClassLocator({"SlowConnection": SlowConnection, "Repository": Repository})
        )

        repository = resolver.resolve("repository")

        assert repository.connection is resolver.resolve("connection")

    def test_concurrent_resolution_builds_singleton_once(self):
        """Test that threads racing on a cold cache share one instance."""
        SlowConnection.instances = 0
        bean_map = BeanMap()
        bean_map.bean("connection", klass="SlowConnection")
        resolver = SynchronizedResolver(bean_map, ClassLocator({"SlowConnection": SlowConnection}))
        results = []

        threads = [threading.Thread(target=lambda: results.append(resolver.resolve("connection"))) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert SlowConnection.instances == 1
        assert len(results) == 8
        assert all(result is results[0] for result in results)

    def test_reset_cache(self):
        """Test that reset_cache still clears singletons."""
        bean_map = BeanMap()
        bean_map.bean("connection", klass="SlowConnection")
        resolver = SynchronizedResolver(bean_map, ClassLocator({"SlowConnection": SlowConnection}))
        first = resolver.resolve("connection")

        resolver.reset_cache()

        assert resolver.resolve("connection") is not first
