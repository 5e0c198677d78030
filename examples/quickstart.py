"""decaysearch Quickstart: one phrase, ten search vectors."""

from decaysearch import Console, DecaySearchConfig, GenerationParams

# 1. Create a console (opens the primary vector in your browser)
console = Console(DecaySearchConfig(boot_delay=0.4))

# 2. Replay the boot sequence and wait for it
console.boot().wait()

# 3. Generate and launch
result = console.execute("annual report (2024", GenerationParams(vector_count=5, density=300))

# 4. Everything past the primary vector is for manual follow-up
for i, url in enumerate(result.urls):
    print(f"V_{i:02d}  {url[:96]}...")

# 5. Diagnostics and the console log
for diag in result.diagnostics:
    print(f"! {diag.kind.value}: {diag.text}")
print("\n--- Console ---")
for entry in console.log.entries:
    print(f"[{entry.timestamp}] {entry.message}")
