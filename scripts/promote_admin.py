# scripts/promote_admin.py

"""
Grants the admin role to an already synced profile.

Role changes over the API need an admin, so the first one is made here:

    python scripts/promote_admin.py --email someone@example.com
"""

import asyncio

import typer

from portkey.core.database import get_async_session_context
from portkey.domains.usr import crud as usr_crud
from portkey.domains.usr.models import UserRole

cli = typer.Typer()


async def promote(email: str) -> bool:
    async with get_async_session_context() as db:
        db_user = await usr_crud.user.get_by_email(db, email=email)
        if not db_user:
            return False
        await usr_crud.user.update(db, db_obj=db_user, obj_in={"role": UserRole.ADMIN})
    return True


@cli.command()
def main(
    email: str = typer.Option(
        ..., '--email', '-e',
        prompt="E-mail of the profile to promote",
        help="E-mail of a profile that has already signed in once."
    ),
):
    """
    Promotes a profile to the admin role.
    """
    if not asyncio.run(promote(email)):
        typer.echo(f"Error: no profile with e-mail {email}. Sign in once so the profile is synced.", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"{email} is now an admin.")


if __name__ == "__main__":
    cli()
