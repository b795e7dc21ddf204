# rfmatch/tl_waveforms.py
import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

def _finite(values):
    # open circuits and SWR overflow plot as gaps
    arr = np.array(values, dtype=float)
    return np.where(np.isfinite(arr), arr, np.nan)

def _columns(points):
    f = np.array([p.frequency_mhz for p in points])
    re = _finite([p.real for p in points])
    im = _finite([p.imag for p in points])
    swr = _finite([p.swr for p in points])
    return f, re, im, swr

def plot_swr_vs_freq(points, savepath, title='SWR vs Frequency'):
    f, _, _, swr = _columns(points)
    fig, ax = plt.subplots(figsize=(7,5))
    ax.plot(f, swr, linewidth=2)
    ax.axhline(1.0, color='gray', linewidth=0.8)
    ax.set_xlabel('Frequency (MHz)')
    ax.set_ylabel('SWR')
    ax.set_title(title)
    ax.grid(True, linestyle="--", alpha=0.6)
    fig.tight_layout()
    fig.savefig(savepath, dpi=120)
    plt.close(fig)

def plot_impedance_vs_freq(points, savepath, z0=None):
    f, re, im, _ = _columns(points)
    fig, ax = plt.subplots(figsize=(7,5))
    ax.plot(f, re, label='Re(Zin)')
    ax.plot(f, im, label='Im(Zin)')
    if z0 is not None:
        ax.axhline(z0, color='gray', linestyle=':', label=f'Z0 = {z0:g} Ω')
    ax.set_xlabel('Frequency (MHz)')
    ax.set_ylabel('Impedance (Ω)')
    ax.set_title('Input impedance vs Frequency')
    ax.legend()
    ax.grid(True, linestyle="--", alpha=0.6)
    fig.tight_layout()
    fig.savefig(savepath, dpi=120)
    plt.close(fig)
