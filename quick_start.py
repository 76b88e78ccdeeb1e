import math

import numpy as np

from histogram_mi import EstimatorOptions, compute, compute_vec, entropy, normalized


def main():
    """
    A small, self-contained example of the estimation pipeline.
    """
    print("--- Starting Mutual Information Analysis ---")

    # 1. --- Data Generation ---
    rng = np.random.default_rng(42)
    n_samples = 2000
    x = rng.uniform(-1.0, 1.0, size=n_samples)
    y_quadratic = x**2 + 0.05 * rng.normal(size=n_samples)
    y_noise = rng.normal(size=n_samples)
    print(f"\nStep 1: Generated {n_samples} paired samples.")
    print(f"Pearson r(x, x^2) = {np.corrcoef(x, y_quadratic)[0, 1]:.3f}")

    # 2. --- Mutual Information ---
    opts = EstimatorOptions(bins=10, base=2)
    print("\nStep 2: Mutual information in bits (10 equal-width bins).")
    print(f"MI(x; x^2 + noise) = {compute(x, y_quadratic, opts):.4f}")
    print(f"MI(x; noise)       = {compute(x, y_noise, opts):.4f}")

    # 3. --- Entropy and normalized MI ---
    print("\nStep 3: Entropy and normalized MI.")
    print(f"H(x)               = {entropy(x, opts):.4f}")
    print(f"NMI(x; x^2 + noise) = {normalized(x, y_quadratic, opts):.4f}")

    # 4. --- Discrete data and other bases ---
    labels = [1, 2, 3, 4, 5, 1, 2, 3, 4, 5]
    print("\nStep 4: Integer-coded data is used as-is.")
    print(f"MI(labels; labels) = {compute(labels, labels):.6f} bits")
    print(f"MI(labels; labels) = {compute(labels, labels, {'base': math.e}):.6f} nats")

    # 5. --- One variable against many ---
    mi_values = compute_vec(x, np.vstack([y_quadratic, y_noise, -x]), opts)
    print("\nStep 5: MI of x against several candidates:", np.round(mi_values, 4))

    print("\n--- Analysis Complete ---")


if __name__ == "__main__":
    main()
