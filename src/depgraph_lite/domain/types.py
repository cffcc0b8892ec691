"""Shared type aliases used across the graph layers."""
from __future__ import annotations

from typing import TypeAlias

NodeId: TypeAlias = int  # dense, allocated from 0 in registration order
