import asyncio

from neurobloom import PlaygroundLoop, Config

if __name__ == "__main__":
    config = Config()
    playground_loop = PlaygroundLoop(config)
    asyncio.run(playground_loop.run())
