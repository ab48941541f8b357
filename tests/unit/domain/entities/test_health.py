from solarcast.domain.entities.health import (
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)


def _dependency(name: str, status: ServiceStatus) -> DependencyStatus:
    return DependencyStatus(name=name, status=status)


def test_all_up_is_up():
    health = SystemHealth.from_dependencies(
        [_dependency("a", ServiceStatus.UP), _dependency("b", ServiceStatus.UP)]
    )

    assert health.status is ServiceStatus.UP
    assert [dep.name for dep in health.dependencies] == ["a", "b"]


def test_worst_status_wins():
    assert (
        SystemHealth.from_dependencies(
            [_dependency("a", ServiceStatus.UNKNOWN), _dependency("b", ServiceStatus.UP)]
        ).status
        is ServiceStatus.UNKNOWN
    )
    assert (
        SystemHealth.from_dependencies(
            [
                _dependency("a", ServiceStatus.UNKNOWN),
                _dependency("b", ServiceStatus.DEGRADED),
            ]
        ).status
        is ServiceStatus.DEGRADED
    )
    assert (
        SystemHealth.from_dependencies(
            [
                _dependency("a", ServiceStatus.DOWN),
                _dependency("b", ServiceStatus.DEGRADED),
            ]
        ).status
        is ServiceStatus.DOWN
    )


def test_no_dependencies_is_up():
    assert SystemHealth.from_dependencies([]).status is ServiceStatus.UP
