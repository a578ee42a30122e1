"""Query command.

Read-only report of the saved list, topology, backdrop mode and the
current image of every slot.
"""

import json
from typing import Any, Dict, Optional

from ..exceptions import XfwallError
from ..session import DesktopSession
from ..topology import SingleWorkspace, Slot


def _read_list_path(session: DesktopSession) -> Dict[str, Optional[str]]:
    try:
        return {"path": session.store.get_list_path(), "error": None}
    except XfwallError as e:
        return {"path": None, "error": str(e)}


def _read_image(session: DesktopSession, slot: Slot) -> Dict[str, Optional[str]]:
    try:
        return {"image": session.store.get_image(slot), "error": None}
    except XfwallError as e:
        return {"image": None, "error": str(e)}


def get_query_json(session: DesktopSession) -> Dict[str, Any]:
    """Get the full query report as a JSON-serializable dict."""
    snapshot = session.snapshot
    single_workspace = snapshot.mode.index if isinstance(snapshot.mode, SingleWorkspace) else None

    monitors = {}
    for monitor in snapshot.monitors:
        workspaces = {}
        for workspace in range(snapshot.workspace_count):
            workspaces[str(workspace)] = _read_image(session, Slot(monitor, workspace))
        monitors[monitor] = workspaces

    return {
        "channel": session.client.channel,
        "list_file": _read_list_path(session),
        "monitors": monitors,
        "workspace_count": snapshot.workspace_count,
        "single_mode": snapshot.single_mode,
        "single_workspace": single_workspace,
    }


def show_query(session: DesktopSession, json_output: bool = False) -> None:
    """
    Display the current backdrop configuration.

    Args:
        session: Desktop session with a resolved topology
        json_output: If True, output JSON instead of human-readable text
    """
    report = get_query_json(session)

    if json_output:
        print(json.dumps(report, indent=2))
        return

    list_file = report["list_file"]
    if list_file["error"]:
        print(f"Could not get list, {list_file['error']}")
    else:
        print(f"Current list file is : {list_file['path']}")

    single_mode = report["single_mode"]
    single_workspace = report["single_workspace"]

    print("Current image file(s) set:")
    for monitor, workspaces in report["monitors"].items():
        print(f" {monitor} : Mode = {'single' if single_mode else 'separate'}")
        for workspace, current in workspaces.items():
            marker = "*" if single_mode and int(workspace) == single_workspace else " "
            image = current["image"] if current["error"] is None else f"<unavailable: {current['error']}>"
            print(f"\tworkspace {workspace}{marker}: {image}")

    print(f"Single backdrop mode = {str(single_mode).lower()}")
    if single_mode:
        print(f"Single backdrop mode workspace = {single_workspace}")
