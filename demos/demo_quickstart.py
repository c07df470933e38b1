# demos/demo_quickstart.py
from tensorprimer.core.ops import make_rng
from tensorprimer.demos import DEMOS


def main(seed: int = 145):
    # Run every demo once, non-interactively, with a fixed seed
    rng = make_rng(seed)
    for key, mod in DEMOS.items():
        print(f"\n--- {key}) {mod.MENU_LABEL}")
        mod.main(rng=rng)


if __name__ == "__main__":
    main()
