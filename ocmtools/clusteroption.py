"""Command-line options that select one or more managed clusters."""

from __future__ import annotations

import argparse
import csv
from dataclasses import dataclass, field


def _read_csv(value: str) -> list[str]:
    if value == "":
        return []
    return next(csv.reader([value]))


@dataclass
class ClusterOption:
    """The --cluster / --clusters pair of options."""

    cluster: str = ""
    clusters: list[str] = field(default_factory=list)
    _allow_unset: bool = field(default=False, repr=False)

    def allow_unset(self) -> "ClusterOption":
        """Let validation pass when neither option is given."""
        self._allow_unset = True
        return self

    def add_flags(self, parser: argparse.ArgumentParser) -> None:
        """Register the options on an argparse parser, bound to this object."""
        option = self

        class _ClusterAction(argparse.Action):
            def __call__(self, parser, namespace, values, option_string=None):
                option.cluster = values
                setattr(namespace, self.dest, values)

        class _ClustersAction(argparse.Action):
            def __call__(self, parser, namespace, values, option_string=None):
                items = _read_csv(values)
                current = getattr(namespace, self.dest, None)
                if current is self.default or current is None:
                    merged = list(items)
                else:
                    merged = list(current) + items
                option.clusters = merged
                setattr(namespace, self.dest, merged)

        parser.add_argument(
            "-c",
            "--cluster",
            action=_ClusterAction,
            default="",
            help="Name of the managed cluster",
        )
        parser.add_argument(
            "--clusters",
            action=_ClustersAction,
            default=[],
            help="A list of the managed clusters.",
        )

    def all_clusters(self) -> set[str]:
        """Return every cluster named by either option."""
        output = set(self.clusters)
        if self.cluster:
            output.add(self.cluster)
        return output

    def validate(self) -> None:
        """Raise ValueError when the options are not usable."""
        if any(not name for name in self.clusters):
            raise ValueError("--clusters cannot be set as an empty value")
        if not self.cluster and not self.clusters and not self._allow_unset:
            raise ValueError("either --cluster or --clusters needs to be set")