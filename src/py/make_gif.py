"""Generate a GIF animation from simulation output JSON."""
import argparse
import io
import json
from typing import Dict, List

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from PIL import Image

from utils import count_delivered

ROBOT_COLORS = [
    "#e6194b", "#3cb44b", "#4363d8", "#f58231", "#911eb4",
    "#42d4f4", "#f032e6", "#bfef45", "#fabed4", "#469990",
    "#dcbeff", "#9A6324", "#800000", "#aaffc3", "#808000",
    "#000075", "#a9a9a9",
]


def load_sim(path: str) -> Dict:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def render_frame(
    building: Dict,
    positions: Dict[str, int],
    timestep: int,
    title: str,
    caption: str = "",
) -> Image.Image:
    lowest = building["lowest_floor"]
    top = lowest + building["floors"] - 1
    mailroom = building["mailroom_floor"]
    robot_ids = list(positions)
    columns = max(len(robot_ids), 1)

    fig, ax = plt.subplots(figsize=(1.0 + 0.6 * columns, 1.5 + 0.3 * building["floors"]))
    ax.set_xlim(-0.5, columns - 0.5)
    ax.set_ylim(lowest - 0.5, top + 0.5)
    ax.set_title(f"{title}  t={timestep}", fontsize=10, fontweight="bold")
    ax.set_xticks(range(len(robot_ids)))
    ax.set_xticklabels(robot_ids, fontsize=7)
    ax.set_yticks(range(lowest, top + 1))
    ax.tick_params(axis="y", labelsize=7)
    ax.set_ylabel("floor", fontsize=8)

    # Draw floors
    for floor in range(lowest, top + 1):
        color = "#ffe0b2" if floor == mailroom else "#f5f5f5"
        ax.add_patch(plt.Rectangle((-0.5, floor - 0.5), columns, 1, color=color, ec="#ddd", lw=0.3))

    # Draw robots
    for i, rid in enumerate(robot_ids):
        color = ROBOT_COLORS[i % len(ROBOT_COLORS)]
        circle = plt.Circle((i, positions[rid]), 0.3, color=color, ec="black", lw=1.0, zorder=3)
        ax.add_patch(circle)

    if caption:
        fig.text(0.05, 0.01, caption, fontsize=8, color="#555555", va="bottom")

    plt.tight_layout()
    fig.subplots_adjust(bottom=0.1 if caption else 0.05)

    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=100, bbox_inches="tight")
    plt.close(fig)
    buf.seek(0)
    return Image.open(buf).copy()


def sample_frames(length: int, max_frames: int) -> List[int]:
    if length > max_frames:
        step = max(1, length // max_frames)
        frame_indices = list(range(0, length, step))
        if frame_indices[-1] != length - 1:
            frame_indices.append(length - 1)
        return frame_indices
    return list(range(length))


def make_gif(
    sim_path: str,
    output_path: str,
    max_frames: int = 60,
    frame_duration: int = 300,
    title: str = "",
) -> int:
    sim = load_sim(sim_path)
    building = sim["building"]
    trajectories: Dict[str, List[int]] = {
        rid: data["trajectory"] for rid, data in sim["robots"].items()
    }
    deliveries = sim.get("deliveries", [])

    max_len = max(len(t) for t in trajectories.values()) if trajectories else 0
    frame_indices = sample_frames(max_len, max_frames)

    frames = []
    for t_idx in frame_indices:
        positions = {rid: traj[min(t_idx, len(traj) - 1)] for rid, traj in trajectories.items()}
        caption = f"Delivered: {count_delivered(deliveries, t_idx)}/{sim.get('mail_created', len(deliveries))}"
        frames.append(render_frame(building, positions, t_idx, title, caption))
        if len(frames) % 10 == 0:
            print(f"  rendered {len(frames)}/{len(frame_indices)} frames")

    if not frames:
        print("No frames to render!")
        return 0

    frames[0].save(
        output_path,
        save_all=True,
        append_images=frames[1:],
        duration=frame_duration,
        loop=0,
    )
    print(f"Saved {len(frames)} frames to {output_path}")
    return len(frames)


def main():
    parser = argparse.ArgumentParser(description="Generate GIF from simulation output")
    parser.add_argument("--sim", required=True, help="Path to simulation output JSON")
    parser.add_argument("--output", required=True, help="Output GIF path")
    parser.add_argument("--max_frames", type=int, default=60, help="Max frames in GIF")
    parser.add_argument("--duration", type=int, default=300, help="Frame duration in ms")
    parser.add_argument("--title", default="Automail", help="Title for the animation")
    args = parser.parse_args()
    make_gif(args.sim, args.output, args.max_frames, args.duration, args.title)


if __name__ == "__main__":
    main()
