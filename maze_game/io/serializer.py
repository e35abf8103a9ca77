import struct
import json
import zlib
from typing import Dict, Any, Tuple
from array import array
from maze_game.core.grid import Grid


class MazeSerializer:
    MAGIC = b"MAZG"
    VERSION = 1

    # Flags
    FLAG_COMPRESSED = 1

    @staticmethod
    def save(grid: Grid, filepath: str, meta: Dict[str, Any] = None, compress=False):
        """
        Saves the maze to a binary file.
        Format (little-endian):
        - MAGIC (4 bytes)
        - VERSION (1 byte)
        - FLAGS (1 byte)
        - WIDTH (4 bytes)
        - HEIGHT (4 bytes)
        - META_LEN (4 bytes)
        - META_JSON (META_LEN bytes)
        - DATA_LEN (4 bytes)
        - DATA (one byte per cell, zlib compressed if flagged)
        """
        if meta is None:
            meta = {}

        flags = 0
        if compress:
            flags |= MazeSerializer.FLAG_COMPRESSED

        meta_bytes = json.dumps(meta).encode('utf-8')

        data = grid.cells.tobytes()
        if compress:
            data = zlib.compress(data)

        with open(filepath, "wb") as f:
            f.write(MazeSerializer.MAGIC)
            f.write(struct.pack("<BB", MazeSerializer.VERSION, flags))
            f.write(struct.pack("<II", grid.width, grid.height))
            f.write(struct.pack("<I", len(meta_bytes)))
            f.write(meta_bytes)
            f.write(struct.pack("<I", len(data)))
            f.write(data)

    @staticmethod
    def load(filepath: str) -> Tuple[Grid, Dict[str, Any]]:
        with open(filepath, "rb") as f:
            magic = f.read(4)
            if magic != MazeSerializer.MAGIC:
                raise ValueError("Invalid file format")

            version, flags = struct.unpack("<BB", f.read(2))
            if version > MazeSerializer.VERSION:
                raise ValueError(f"Unsupported maze file version {version}")

            width, height = struct.unpack("<II", f.read(8))
            meta_len = struct.unpack("<I", f.read(4))[0]
            meta = json.loads(f.read(meta_len).decode('utf-8'))

            data_len = struct.unpack("<I", f.read(4))[0]
            data = f.read(data_len)
            if flags & MazeSerializer.FLAG_COMPRESSED:
                data = zlib.decompress(data)

            if len(data) != width * height:
                raise ValueError(f"Cell data size {len(data)} does not match {width}x{height}")

            grid = Grid(width, height)
            # Replace cells completely
            grid.cells = array('B', data)
            return grid, meta
