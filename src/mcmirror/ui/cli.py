# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from mcmirror.app import list_mirror_peers, match_peer_secret
from mcmirror.config import configure_logging
from mcmirror.domain.model import PeerRef, StorageClusterRef
from mcmirror.domain.naming import unique_name, unique_secret_name

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Inspect multicluster mirroring secrets")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    name = subparsers.add_parser("unique-name", help="Print the SHA-512 name of components")
    name.add_argument("components", nargs="+", help="Ordered name components")

    secret_name = subparsers.add_parser(
        "secret-name", help="Print the 39-character secret name for a storage cluster"
    )
    _add_peer_arguments(secret_name)
    secret_name.add_argument(
        "--prefix",
        type=str,
        default=None,
        help="Optional prefix (an empty string still counts as a prefix)",
    )

    subparsers.add_parser("mirror-peers", help="List MirrorPeers from the configured cluster")

    match = subparsers.add_parser(
        "match-secret", help="Find the exchange secret describing one peer"
    )
    _add_peer_arguments(match)
    match.add_argument(
        "--secrets-namespace",
        type=str,
        required=True,
        help="Namespace to list candidate secrets from",
    )
    match.add_argument(
        "--all-secrets",
        action="store_true",
        help="Consider secrets without the secret-type label too",
    )

    return parser.parse_args(list(argv))


def _add_peer_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--cluster", type=str, required=True, help="Managed cluster name")
    parser.add_argument(
        "--namespace", type=str, required=True, help="Storage cluster namespace"
    )
    parser.add_argument(
        "--storage-cluster", type=str, required=True, help="Storage cluster name"
    )


def _peer_ref(args: argparse.Namespace) -> PeerRef:
    return PeerRef(
        cluster_name=args.cluster,
        storage_cluster_ref=StorageClusterRef(name=args.storage_cluster, namespace=args.namespace),
    )


def _secret_name(args: argparse.Namespace) -> str:
    if args.prefix is None:
        return unique_secret_name(args.cluster, args.namespace, args.storage_cluster)
    return unique_secret_name(args.cluster, args.namespace, args.storage_cluster, args.prefix)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        if parsed_args.command == "unique-name":
            print(unique_name(*parsed_args.components))
        elif parsed_args.command == "secret-name":
            print(_secret_name(parsed_args))
        elif parsed_args.command == "mirror-peers":
            for mirror_peer in list_mirror_peers():
                first, second = mirror_peer.spec.items
                print(
                    f"{mirror_peer.name}: {_format_peer(first)} <-> {_format_peer(second)} "
                    f"mode={mirror_peer.spec.mirroring_mode} "
                    f"interval={mirror_peer.spec.scheduling_interval}"
                )
        elif parsed_args.command == "match-secret":
            secret = match_peer_secret(
                _peer_ref(parsed_args),
                namespace=parsed_args.secrets_namespace,
                only_labelled=not parsed_args.all_secrets,
            )
            if secret is None:
                sys.exit(3)
            print(secret.name)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


def _format_peer(peer_ref: PeerRef) -> str:
    ref = peer_ref.storage_cluster_ref
    return f"{peer_ref.cluster_name}/{ref.namespace}/{ref.name}"


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
