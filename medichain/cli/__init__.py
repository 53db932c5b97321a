"""
MediChain CLI Tool

This module provides a command-line interface that invokes the medicine ledger
contract against a local world state, in the way a peer would submit a
transaction: a function name followed by string arguments.

Example:
    medichain invoke InitLedger
    medichain invoke CreateMedicine MEDICINE2 Paracetamol 500mg Tableta 31/01/2026 40 7654321
    medichain invoke QueryAllMedicines
"""

import json
import logging

import click

from medichain.chaincode import Chaincode
from medichain.config.seed import SeedDataError
from medichain.config.settings import get_settings
from medichain.contracts.medicine_contract import MedicineLedgerContract
from medichain.ledger.stub import LedgerError, TransactionContext
from medichain.storage import create_world_state

logger = logging.getLogger(__name__)


def _build_chaincode(contract_config: dict) -> Chaincode:
    """Create the chaincode runtime for the configured contract"""
    try:
        contract = MedicineLedgerContract.from_config(contract_config)
    except SeedDataError as e:
        raise click.ClickException(str(e))
    return Chaincode(contract)


@click.group()
@click.option('--env', default=None, help='Settings environment (development, production, testing)')
@click.option('--backend', type=click.Choice(['memory', 'sqlite']), default=None, help='World state backend')
@click.option('--db', 'db_path', default=None, help='SQLite world state file')
@click.option('--seed-file', default=None, type=click.Path(exists=True, dir_okay=False),
              help='JSON list of medicines written by InitLedger')
@click.option('--no-overwrite', is_flag=True, help='Reject CreateMedicine on an existing key')
@click.option('--legacy-decode', is_flag=True, help='Return empty records for malformed stored values')
@click.pass_context
def medichain(ctx, env, backend, db_path, seed_file, no_overwrite, legacy_decode):
    """MediChain CLI - medicine ledger chaincode runner"""
    settings = get_settings(env)

    errors = settings.validate_config()
    if errors:
        raise click.ClickException("; ".join(errors))

    logging.basicConfig(level=settings.LOG_LEVEL.upper(), format=settings.LOG_FORMAT)

    storage_config = settings.get_storage_config()
    if backend:
        storage_config["backend"] = backend
    if db_path:
        storage_config["database_path"] = db_path

    contract_config = settings.get_contract_config()
    if seed_file:
        contract_config["seed_file"] = seed_file
    if no_overwrite:
        contract_config["allow_overwrite"] = False
    if legacy_decode:
        contract_config["strict_decode"] = False

    ctx.ensure_object(dict)
    ctx.obj['storage'] = storage_config
    ctx.obj['contract'] = contract_config


@medichain.command()
@click.argument('function')
@click.argument('args', nargs=-1)
@click.pass_context
def invoke(ctx, function, args):
    """Invoke FUNCTION with ARGS against the world state"""
    chaincode = _build_chaincode(ctx.obj['contract'])

    try:
        world_state = create_world_state(ctx.obj['storage'])
    except (LedgerError, ValueError) as e:
        raise click.ClickException(f"Cannot open world state: {e}")

    try:
        response = chaincode.invoke(TransactionContext(world_state), function, list(args))
    finally:
        world_state.close()

    if not response.ok:
        raise click.ClickException(response.message)

    result = response.json()
    if result is not None:
        click.echo(json.dumps(result, indent=2, ensure_ascii=False))


@medichain.command()
@click.pass_context
def functions(ctx):
    """List the transactions exposed by the contract"""
    metadata = _build_chaincode(ctx.obj['contract']).get_metadata()
    click.echo(f"Contract: {metadata['contract']}")
    for tx in metadata['transactions']:
        click.echo(f"  {tx['name']}({', '.join(tx['parameters'])})")


if __name__ == '__main__':
    medichain()
