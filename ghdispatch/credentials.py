"""
netrc-backed credential storage.

The file format is the long-standing netrc convention; see
https://www.gnu.org/software/inetutils/manual/html_node/The-_002enetrc-file.html
"""

import netrc
import os
from collections.abc import Iterable, Mapping
from pathlib import Path

from ghdispatch.config import default_netrc_path
from ghdispatch.logging import get_logger
from ghdispatch.types.credentials import CredentialRecord

logger = get_logger("auth")


class NetrcStore:
    """
    Reads and writes host-keyed credentials in a netrc file.

    Example:
        ```python
        store = NetrcStore()
        records = store.load()
        records["github.com"] = CredentialRecord(login="octo", password="ghp_...")
        store.save(records)
        ```
    """

    def __init__(self, path: str | os.PathLike | None = None) -> None:
        self.path = Path(path) if path is not None else default_netrc_path()

    def _parse(self) -> netrc.netrc:
        return netrc.netrc(str(self.path))

    def load(self) -> dict[str, CredentialRecord]:
        """
        Read all machine entries.

        Any error reading or parsing the file yields an empty mapping.
        """
        try:
            parsed = self._parse()
        except (OSError, netrc.NetrcParseError) as e:
            logger.debug("No credentials loaded from %s: %s", self.path, e)
            return {}

        records: dict[str, CredentialRecord] = {}
        for host, (login, account, password) in parsed.hosts.items():
            records[host] = CredentialRecord(
                login=login or None,
                account=account or None,
                password=password or "",
            )
        return records

    def _macros(self) -> dict[str, list[str]]:
        try:
            return dict(self._parse().macros)
        except (OSError, netrc.NetrcParseError):
            return {}

    def save(self, records: Mapping[str, CredentialRecord]) -> None:
        """
        Rewrite the file with the given records.

        ``macdef`` blocks already present in the file are kept, as are the
        ``macdef`` values carried by records.
        """
        macros = self._macros()
        for host, record in records.items():
            if record.macdef:
                macros[host] = record.macdef.splitlines(keepends=True)

        text = format_netrc(records, macros)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        logger.debug("Wrote %d credential record(s) to %s", len(records), self.path)


def format_netrc(
    records: Mapping[str, CredentialRecord],
    macros: Mapping[str, list[str]] | None = None,
) -> str:
    """Render records (and macro definitions) in netrc syntax."""
    lines: list[str] = []
    for host, record in records.items():
        lines.append("default" if host == "default" else f"machine {host}")
        if record.login:
            lines.append(f"\tlogin {record.login}")
        if record.account:
            lines.append(f"\taccount {record.account}")
        lines.append(f"\tpassword {record.password}")

    for name, body in (macros or {}).items():
        lines.append(f"macdef {name}")
        lines.extend(line.rstrip("\n") for line in body)
        # a blank line terminates a macro definition
        lines.append("")

    return "\n".join(lines) + "\n"


def token_for(
    records: Mapping[str, CredentialRecord], hosts: Iterable[str]
) -> str | None:
    """First non-empty password among hosts, in order."""
    for host in hosts:
        record = records.get(host)
        if record is not None and record.password:
            return record.password
    return None
