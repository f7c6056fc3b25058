import asyncio
import json
import os
import sys

import websockets
from dotenv import load_dotenv

load_dotenv()

URI = os.getenv("MCP_WS_URL", f"ws://localhost:{os.getenv('PORT', '10000')}/mcp")


async def list_tools():
    print(f"Connecting to {URI}...")
    try:
        async with websockets.connect(URI) as ws:
            print("Connected.")

            # 1. Negative test: garbage must come back as a parse error
            await ws.send("garbage")
            data = json.loads(await ws.recv())
            if data.get("error", {}).get("code") != -32700 or data.get("id") is not None:
                print(f"FAILED: Expected parse error, got {data}")
                sys.exit(1)

            # 2. Positive test: tools/list
            await ws.send(json.dumps({"jsonrpc": "2.0", "id": 1, "method": "tools/list"}))
            data = json.loads(await ws.recv())
            tools = data.get("result", {}).get("tools", [])
            if data.get("id") != 1 or not tools:
                print(f"FAILED: Expected tool list, got {data}")
                sys.exit(1)

            for tool in tools:
                print(f"  {tool['name']:<32} {tool['description']}")

    except Exception as e:
        print(f"WS Failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(list_tools())
