#!/usr/bin/env python3
"""Chained steps example.

Feeds a message list through three steps standing in for sequential
LLM calls, then prints the trace.

Usage:
    python examples/chained_steps.py
"""

import asyncio
from datetime import datetime

from rich.console import Console

from axon import END, ExecutionContext, ExecutionTrace, MessageGraph
from axon.core.logging_config import configure_logging


async def draft(ctx, messages):
    await asyncio.sleep(0.1)  # stand-in for an API call
    return [*messages, "Draft: graphs are lists with opinions."]


async def critique(ctx, messages):
    ctx.check_cancelled()
    await asyncio.sleep(0.1)
    return [*messages, "Critique: too glib."]


def revise(ctx, messages):
    return [*messages, "Revision: a graph is a set of nodes joined by edges."]


async def main():
    configure_logging(level="DEBUG")

    graph = MessageGraph[list[str]]()
    graph.add_node("draft", draft)
    graph.add_node("critique", critique)
    graph.add_node("revise", revise)
    graph.chain("draft", "critique", "revise", END)
    graph.set_entry_point("draft")

    runnable = graph.compile()

    trace = ExecutionTrace(graph_id="writer", start_time=datetime.now())
    result = await runnable.invoke(["Explain graphs in one line."], ExecutionContext(trace=trace))

    console = Console()
    for message in result:
        console.print(message)
    console.print(trace.to_table())


if __name__ == "__main__":
    asyncio.run(main())
