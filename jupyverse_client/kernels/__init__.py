from __future__ import annotations

from ..api import Api, _decode, _path
from .models import CreateKernelBody, GetKernelSpecsResponse, Kernel


class KernelSpecs(Api):
    async def list_kernelspecs(self) -> GetKernelSpecsResponse:
        data = await self._send("GET", "kernelspecs")
        return _decode(GetKernelSpecsResponse, data)


class Kernels(Api):
    async def list_kernels(self) -> list[Kernel]:
        data = await self._send("GET", "kernels")
        return _decode(list[Kernel], data)

    async def create_kernel(self, body: CreateKernelBody | None = None) -> Kernel:
        """Start a kernel, of the server's default kernel spec if no name is given."""
        if body is None:
            body = CreateKernelBody()
        data = await self._send("POST", "kernels", body)
        return _decode(Kernel, data)

    async def get_kernel(self, kernel_id: str) -> Kernel:
        data = await self._send("GET", _path("kernels", kernel_id))
        return _decode(Kernel, data)

    async def delete_kernel(self, kernel_id: str) -> None:
        await self._send("DELETE", _path("kernels", kernel_id))

    async def interrupt_kernel(self, kernel_id: str) -> None:
        await self._send("POST", _path("kernels", kernel_id, "interrupt"))

    async def restart_kernel(self, kernel_id: str) -> Kernel:
        data = await self._send("POST", _path("kernels", kernel_id, "restart"))
        return _decode(Kernel, data)
