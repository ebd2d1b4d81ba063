"""Run coroutines from synchronous Flask views"""

import asyncio


def run_in_new_loop(coro):
    """Run coro in a fresh event loop per request to avoid loop state issues"""
    loop = asyncio.new_event_loop()
    try:
        asyncio.set_event_loop(loop)
        return loop.run_until_complete(coro)
    finally:
        try:
            loop.run_until_complete(loop.shutdown_asyncgens())
        finally:
            asyncio.set_event_loop(None)
            loop.close()
