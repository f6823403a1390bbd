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
GHOST-Spline Numba CUDA kernel module.

Contains the JIT-compiled CUDA kernels for the Jacobi linear solve (Ax=b), the
per-block squared-difference reduction and the natural cubic spline pipeline.
All kernels take the real problem size ``n`` and leave padding indices alone.
"""

from numba import cuda, float64


# =============================================================================
# ORTAK ÇEKİRDEKLER
# =============================================================================

@cuda.jit
def init_kernel(buf, size):
    """Tamponun ilk ``size`` elemanını sıfırla."""
    idx = cuda.grid(1)
    if idx < size:
        buf[idx] = 0.0


@cuda.jit
def difference_kernel(x_a, x_b, partial, n):
    """
    Blok içi kare farkları toplamı.

    Her thread (x_a[i] - x_b[i])^2 değerini paylaşımlı belleğe yazar, blok
    ağaç indirgemesiyle toplanır ve sonuç partial[blockIdx] hücresine yazılır.
    Paylaşımlı bellek dinamik ayrılır (blockDim.x * 8 bayt).

    Nota:
    - blockDim.x ikinin kuvveti olmak zorunda değil
    - i >= n olan dolgu elemanları 0 katkı verir
    """
    scratch = cuda.shared.array(0, dtype=float64)

    tid = cuda.threadIdx.x
    idx = cuda.grid(1)

    if idx < n:
        d = x_a[idx] - x_b[idx]
        scratch[tid] = d * d
    else:
        scratch[tid] = 0.0
    cuda.syncthreads()

    step = 1
    while step < cuda.blockDim.x:
        if tid % (2 * step) == 0 and tid + step < cuda.blockDim.x:
            scratch[tid] += scratch[tid + step]
        cuda.syncthreads()
        step *= 2

    if tid == 0:
        partial[cuda.blockIdx.x] = scratch[0]


# =============================================================================
# JACOBI KERNEL - Ax = b
# =============================================================================

@cuda.jit
def jacobi_step_kernel(A, b, x_src, x_dst, n):
    """
    Jacobi iterasyon GPU çekirdeği.

    Her GPU thread bir denklem satırını paralel olarak çözer.

    Parametreler:
    -----------
    A : ndarray (G, G)
        Dolgulu katsayı matrisi (G >= n)
    b : ndarray (G,)
        Sağ taraf vektörü
    x_src : ndarray (G,)
        Eski x vektörü (yalnızca okunur)
    x_dst : ndarray (G,)
        Yeni x vektörü (çıktı)
    n : int
        Sistem boyutu

    Formül:
    ------
    x_i^(k+1) = (1/A_ii) * (b_i - Σ_{j≠i} A_ij * x_j^(k))
    """
    idx = cuda.grid(1)

    if idx < n:
        sum_val = 0.0
        for j in range(n):
            if j != idx:
                sum_val += A[idx, j] * x_src[j]

        x_dst[idx] = (b[idx] - sum_val) / A[idx, idx]


# =============================================================================
# DOĞAL KÜBİK SPLINE ÇEKİRDEKLERİ
# =============================================================================

@cuda.jit
def init_rhs_kernel(y, rhs, h, n):
    """
    Üç köşegenli sistemin sabit sağ tarafı.

    rhs_i = 6/h^2 * (y_{i+1} - 2 y_i + y_{i-1}), uç noktalarda 0.
    """
    idx = cuda.grid(1)

    if idx < n:
        if idx == 0 or idx == n - 1:
            rhs[idx] = 0.0
        else:
            rhs[idx] = 6.0 / (h * h) * (y[idx + 1] - 2.0 * y[idx] + y[idx - 1])


@cuda.jit
def jacobi_spline_step_kernel(rhs, c_src, c_dst, n):
    """
    Spline ikinci türev sistemi için tek Jacobi süpürmesi.

    c_{i-1} + 4 c_i + c_{i+1} = rhs_i  =>  c_i = (rhs_i - c_{i-1} - c_{i+1}) / 4

    Doğal sınır koşulu her süpürmede sabitlenir: c_0 = c_{n-1} = 0.
    """
    idx = cuda.grid(1)

    if idx < n:
        if idx == 0 or idx == n - 1:
            c_dst[idx] = 0.0
        else:
            c_dst[idx] = 0.25 * (rhs[idx] - c_src[idx - 1] - c_src[idx + 1])


@cuda.jit
def compute_ab_kernel(y, c, a, b, h, n):
    """
    Segment katsayıları (segment i = [x_{i-1}, x_i], i >= 1).

    b_i = (y_i - y_{i-1}) / h - h (c_i - c_{i-1}) / 6
    a_i = (y_i + y_{i-1}) / 2 - h^2 (c_i + c_{i-1}) / 12
    """
    idx = cuda.grid(1)

    if idx < n:
        if idx == 0:
            a[idx] = 0.0
            b[idx] = 0.0
        else:
            b[idx] = (y[idx] - y[idx - 1]) / h - h * (c[idx] - c[idx - 1]) / 6.0
            a[idx] = 0.5 * (y[idx] + y[idx - 1]) - h * h * (c[idx] + c[idx - 1]) / 12.0
