"""Per-invocation state shared by every CLI command."""

from __future__ import annotations

from dataclasses import dataclass, field

import click

from salonpos.application.notices import NoticeBoard
from salonpos.domain.model.operator import Operator
from salonpos.infrastructure.bootstrap import Repositories
from salonpos.infrastructure.config import AppConfig


@dataclass
class AppContext:
    config: AppConfig
    repos: Repositories
    operator: Operator
    notices: NoticeBoard = field(default_factory=NoticeBoard)

    def flush_notices(self) -> bool:
        """Print and clear posted notices; return True if any was an error."""
        failed = False
        for notice in self.notices.drain():
            text = f"{notice.title}: {notice.description}" if notice.description else notice.title
            if notice.is_error:
                failed = True
                click.echo(f"Error: {text}", err=True)
            else:
                click.echo(text)
        return failed


pass_app = click.make_pass_decorator(AppContext)
