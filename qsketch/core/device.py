"""Device abstraction for amplitude tensors."""

from __future__ import annotations

import torch


class Device:
    """
    A logical simulation device: an underlying PyTorch device plus dtypes.

    Amplitude vectors are allocated on ``torch_device`` with
    ``complex_dtype``; probability vectors use ``dtype``. Attributes should
    not be modified after construction.
    """

    def __init__(
        self,
        name: str,
        torch_device: torch.device,
        dtype: torch.dtype = torch.float64,
        complex_dtype: torch.dtype = torch.complex128,
    ) -> None:
        self.name = name
        self.torch_device = torch_device
        self.dtype = dtype
        self.complex_dtype = complex_dtype

    def __repr__(self) -> str:
        return (
            f"Device(name={self.name!r}, torch_device={self.torch_device}, "
            f"complex_dtype={self.complex_dtype})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Device):
            return NotImplemented
        return (
            self.name == other.name
            and self.torch_device == other.torch_device
            and self.dtype == other.dtype
            and self.complex_dtype == other.complex_dtype
        )

    def __hash__(self) -> int:
        return hash((self.name, str(self.torch_device), self.complex_dtype))

    def as_torch_device(self) -> torch.device:
        """Return the underlying PyTorch device."""
        return self.torch_device


def device(name: str) -> Device:
    """
    Create a Device instance from a device name.

    Supported device names:
        - "sv_cpu": CPU statevector device
        - "sv_cuda": CUDA statevector device (only if CUDA is available)

    Both use double precision (complex128 amplitudes).

    Raises:
        RuntimeError: If "sv_cuda" is requested but CUDA is not available.
        ValueError: If the device name is not supported.
    """
    if name == "sv_cpu":
        return Device(name="sv_cpu", torch_device=torch.device("cpu"))
    elif name == "sv_cuda":
        if not torch.cuda.is_available():
            raise RuntimeError(
                "CUDA device requested but torch.cuda.is_available() is False"
            )
        return Device(name="sv_cuda", torch_device=torch.device("cuda"))
    else:
        supported = ["sv_cpu", "sv_cuda"]
        raise ValueError(
            f"Unsupported device name: {name!r}. Supported devices: {supported}"
        )


def default_device() -> Device:
    """Return the default device (CPU statevector device)."""
    return device("sv_cpu")


def resolve_device(dev: Device | torch.device | str | None) -> Device:
    """
    Normalize the accepted device specifications to a :class:`Device`.

    Args:
        dev: A Device, a device name such as "sv_cpu", a torch.device of
            type "cpu" or "cuda", or None for the default device.

    Raises:
        ValueError: For unsupported names or torch device types.
        TypeError: For any other argument type.
    """
    if dev is None:
        return default_device()
    if isinstance(dev, Device):
        return dev
    if isinstance(dev, str):
        return device(dev)
    if isinstance(dev, torch.device):
        if dev.type == "cpu":
            return device("sv_cpu")
        if dev.type == "cuda":
            return device("sv_cuda")
        raise ValueError(
            f"Unsupported torch.device type: {dev.type}. "
            "Only 'cpu' and 'cuda' are supported."
        )
    raise TypeError(
        f"device must be Device, str, torch.device, or None, got {type(dev)}"
    )
