import timeit
from fretwheel.detect import detect_chords, detect_scales

def run_benchmark():
    # Warmup (builds the template cache)
    detect_chords(["C", "E", "G"])
    detect_scales(["C", "E", "G"])

    setup = """
from fretwheel.detect import detect_chords, detect_scales
    """

    stmt = """
detect_chords(["G", "B", "D", "F"])
detect_chords(["A", "C"])
detect_scales(["C", "D", "E", "F", "G", "A", "B"])
detect_scales(["F#", "A", "C#"])
    """

    times = timeit.repeat(stmt, setup, number=2000, repeat=5)
    print(f"Baseline (min of 5 runs, 2000 loops each): {min(times):.5f} seconds")

if __name__ == '__main__':
    run_benchmark()
