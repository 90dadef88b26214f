"""MIDI port listing."""

import click
import mido

from launchgrid.devices.launchpad import LaunchpadModel


def _describe(port: str) -> str:
    model = LaunchpadModel.detect(port)
    if model is None:
        return port
    return f"{port}  ({model.display_name})"


@click.command(name="ports")
def list_ports():
    """List available MIDI ports and the Launchpads among them."""
    inputs = mido.get_input_names()
    outputs = mido.get_output_names()

    click.echo("MIDI Input Ports:\n")
    if not inputs:
        click.echo("  No MIDI input ports found.")
    else:
        for i, port in enumerate(inputs):
            click.echo(f"  [{i}] {_describe(port)}")

    click.echo("\nMIDI Output Ports:\n")
    if not outputs:
        click.echo("  No MIDI output ports found.")
    else:
        for i, port in enumerate(outputs):
            click.echo(f"  [{i}] {_describe(port)}")
