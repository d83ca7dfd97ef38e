"""Hello Loop -- drive a component headlessly with the animation loop.

Demonstrates:
- Creating an AnimationLoop with a fixed tick rate
- Mounting a component and tapping it
- Watching progress from a frame hook via FrameContext
- Receiving the completion callback after the final redraw

Run: python -m examples.basics
"""

from soothe import AnimationLoop, FrameContext
from soothe_widgets import ProgressButton, ProgressButtonConfig


def main() -> None:
    print("=== Hello Loop ===\n")

    # 20 ticks per second; the button fills over half a second.
    loop = AnimationLoop(tps=20)
    button = ProgressButton(
        ProgressButtonConfig(duration=0.5, action=lambda: print("  -> done!"))
    )
    loop.mount(button)

    def report(ctx: FrameContext) -> None:
        print(
            f"  tick {ctx.tick_number}  |  elapsed={ctx.elapsed:.2f}s  |  "
            f"progress={button.progress.value:.0%}  |  {button.state}"
        )

    loop.on_frame(report)

    button.tap()
    loop.run(12)

    print(f"\nDone. {button.redraws} redraws, clock stopped at tick {loop.clock.tick_number}.")


if __name__ == "__main__":
    main()
