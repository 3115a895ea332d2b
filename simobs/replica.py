"""Observables over the replicas of a replica-exchange simulation."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

from .base import SystemObservable
from .trajectory import SystemTrajectory


class ReplicaExchangeObservable(SystemObservable):
    """One observable per replica, created by ``factory(replica)``."""

    def __init__(
        self,
        replicas: Sequence,
        factory: Callable,
        rec_freq: int,
        rec_thresh: int,
    ) -> None:
        super().__init__(rec_freq, rec_thresh)
        self.replicas = list(replicas)
        self.observables = [factory(replica) for replica in self.replicas]

    def update(self) -> None:
        """Update the observable of every replica."""
        for obs in self.observables:
            obs.update()

    def write(self, file_name: str, directory: str | Path = "Observables") -> list:
        """Write every replica's observable, indexed by its replica number."""
        return [
            obs.write(file_name, i, directory=directory)
            for i, obs in enumerate(self.observables)
        ]

    def average(self) -> float:
        raise TypeError("replica exchange observable has no single average")

    def instant(self) -> float:
        raise TypeError("replica exchange observable has no single instant value")


class RETrajectoryObservable(SystemObservable):
    """Trajectories of the particle positions of every replica."""

    def __init__(self, replicas: Sequence, rec_freq: int, rec_thresh: int) -> None:
        super().__init__(rec_freq, rec_thresh)
        self.trajectories = [SystemTrajectory(replica) for replica in replicas]

    def update(self) -> None:
        """Nothing is accumulated between writes."""

    def append_positions(
        self, file_name: str, time: float, directory: str | Path = "Observables"
    ) -> list[Path]:
        """Append the positions of replica ``i`` to ``<name>_<i>.csv``."""
        return [
            traj.append_positions(file_name, time, i, directory)
            for i, traj in enumerate(self.trajectories)
        ]

    def average(self) -> float:
        raise TypeError("replica trajectory has no average")

    def instant(self) -> float:
        raise TypeError("replica trajectory has no instant value")