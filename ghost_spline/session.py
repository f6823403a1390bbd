# =============================================================================
# Hukuki Başlık (AGPLv3) - Zorunlu Kısım
# =============================================================================

# Copyright (C) 2025 [Adınız Soyadınız]

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <http://www.gnu.org/licenses/>.

# =============================================================================
# Modül Açıklaması (Mühendislik İçin)
# =============================================================================

"""
Device session: the explicit owner of the CUDA context used by the solvers.

A session is opened once, injected into the orchestrators and closed when the
caller is done. It hands out device buffers through ``BufferScope`` objects so
that every buffer of a solve call is released when the call ends, whether it
succeeds or fails. Every kernel launch is followed by a synchronisation point.
"""

import logging
from contextlib import contextmanager

import numpy as np
from numba import config as numba_config
from numba import cuda
from numba.cuda.cudadrv.driver import CudaAPIError
from numba.cuda.cudadrv.error import CudaSupportError

from .config import DEFAULT_GROUP_SIZE, DTYPE
from .exceptions import AllocationFailure, ConfigurationError
from .workgroup import WorkPlan, plan_work

logger = logging.getLogger(__name__)


class DeviceSession:
    """
    CUDA oturumu.

    Örnek:
    -----
    >>> with DeviceSession() as session:
    ...     solution = LinearSolver(session).solve(A, b)
    """

    def __init__(self, max_group_size=None):
        self._requested_group_size = max_group_size
        self._context = None
        self._max_group_size = None
        self._live = {}

    # ─────────────────────────────────────────────────────────────────
    # YAŞAM DÖNGÜSÜ
    # ─────────────────────────────────────────────────────────────────

    def open(self) -> "DeviceSession":
        if self._context is not None:
            return self

        if not cuda.is_available():
            raise ConfigurationError("CUDA cihazı bulunamadı")
        try:
            context = cuda.current_context()
        except (CudaSupportError, CudaAPIError) as exc:
            raise ConfigurationError(f"CUDA bağlamı oluşturulamadı: {exc}") from exc

        # Simülatör cihazı MAX_THREADS_PER_BLOCK bildirmez
        reported = getattr(context.device, "MAX_THREADS_PER_BLOCK", DEFAULT_GROUP_SIZE)
        if self._requested_group_size is not None:
            group_size = min(int(self._requested_group_size), int(reported))
        else:
            group_size = int(reported)
        if group_size < 1:
            raise ConfigurationError(f"Geçersiz blok boyutu: {group_size}")

        self._context = context
        self._max_group_size = group_size
        logger.info(
            "CUDA oturumu açıldı (simülatör=%s, compute capability=%s, max blok=%d)",
            bool(numba_config.ENABLE_CUDASIM),
            context.device.compute_capability,
            group_size,
        )
        return self

    def close(self):
        if self._context is None:
            return
        if self._live:
            logger.warning("Oturum %d canlı tamponla kapatılıyor", len(self._live))
            self._live.clear()
        self._flush_deallocations()
        self._context = None
        logger.info("CUDA oturumu kapatıldı")

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    @property
    def is_open(self) -> bool:
        return self._context is not None

    @property
    def max_group_size(self) -> int:
        self._require_open()
        return self._max_group_size

    @property
    def live_buffers(self) -> int:
        """Henüz serbest bırakılmamış tampon sayısı."""
        return len(self._live)

    def plan(self, size: int) -> WorkPlan:
        return plan_work(size, self.max_group_size)

    # ─────────────────────────────────────────────────────────────────
    # TAMPONLAR
    # ─────────────────────────────────────────────────────────────────

    def allocate(self, name, shape, dtype=DTYPE):
        self._require_open()
        try:
            buf = cuda.device_array(shape, dtype=dtype)
        except (CudaAPIError, MemoryError) as exc:
            raise AllocationFailure(
                f"'{name}' tamponu ayrılamadı (shape={shape})"
            ) from exc
        self._track(name, buf)
        return buf

    def upload(self, name, host_array):
        self._require_open()
        host_array = np.ascontiguousarray(host_array)
        try:
            buf = cuda.to_device(host_array)
        except (CudaAPIError, MemoryError) as exc:
            raise AllocationFailure(
                f"'{name}' tamponu yüklenemedi (shape={host_array.shape})"
            ) from exc
        self._track(name, buf)
        return buf

    def read(self, buf) -> np.ndarray:
        self._require_open()
        return buf.copy_to_host()

    def release(self, buf):
        """
        Tamponu canlı tampon kaydından düş.

        Bu yalnızca kayıt işlemidir: cihaz belleği, Numba son Python
        referansı düştüğünde geri alır. Hata yolunda traceback çerçeveleri
        dizileri bir süre daha tutabilir; ``live_buffers == 0`` belleğin
        boşaldığını değil, oturumun tamponu artık sahiplenmediğini gösterir.
        """
        name = self._live.pop(id(buf), None)
        if name is not None:
            logger.debug("Tampon serbest bırakıldı: %s", name)

    @contextmanager
    def buffers(self):
        """
        Çıkışta içindeki tüm tamponları serbest bırakan kapsam.

        Önce kapsamın tuttuğu referanslar bırakılır, ardından
        gerçek cihazda Numba'nın bekleyen serbest bırakma kuyruğu boşaltılır.
        """
        scope = BufferScope(self)
        try:
            yield scope
        finally:
            scope.release_all()
            self._flush_deallocations()

    # ─────────────────────────────────────────────────────────────────
    # ÇEKİRDEK ÇAĞRISI
    # ─────────────────────────────────────────────────────────────────

    def launch(self, kernel, plan: WorkPlan, *args, shared_bytes=0):
        """Çekirdeği plan üzerinde çalıştır ve tamamlanmasını bekle."""
        self._require_open()
        blocks_per_grid, threads_per_block = plan.launch
        kernel[blocks_per_grid, threads_per_block, 0, shared_bytes](*args)
        cuda.synchronize()

    # ─────────────────────────────────────────────────────────────────
    # YARDIMCI
    # ─────────────────────────────────────────────────────────────────

    def _require_open(self):
        if self._context is None:
            raise ConfigurationError("CUDA oturumu açık değil")

    def _track(self, name, buf):
        self._live[id(buf)] = name
        logger.debug("Tampon ayrıldı: %s %s", name, buf.shape)

    def _flush_deallocations(self):
        # Numba serbest bırakmaları kuyruğa alır; gerçek cihazda hemen boşalt
        if self._context is not None and not numba_config.ENABLE_CUDASIM:
            self._context.deallocations.clear()


class BufferScope:
    """Tek bir çözüm çağrısının sahip olduğu cihaz tamponları."""

    def __init__(self, session: DeviceSession):
        self._session = session
        self._buffers = []

    def allocate(self, name, shape, dtype=DTYPE):
        buf = self._session.allocate(name, shape, dtype)
        self._buffers.append(buf)
        return buf

    def upload(self, name, host_array):
        buf = self._session.upload(name, host_array)
        self._buffers.append(buf)
        return buf

    def __len__(self):
        return len(self._buffers)

    def release_all(self):
        while self._buffers:
            self._session.release(self._buffers.pop())
