import argparse
import json
from typing import Dict, List

from automail import Automail
from capacity import MAX_TEAM_SIZE
from config_loader import build_building, load_config
from data_types import Clock, IdIssuer
from delivery import DeliveryReport
from mail_generator import MailGenerator
from mail_pool import MailPool
from robot import create_robots
from utils import validate_trajectories


def run_simulation(config: Dict, verbose: bool = False) -> Dict:
    building = build_building(config)
    clock = Clock()
    ids = IdIssuer()
    mail_pool = MailPool(clock, verbose=verbose, fleet_size=config["robots"])
    report = DeliveryReport(clock, penalty=config["delivery_penalty"], verbose=verbose)
    generator = MailGenerator(
        building,
        ids,
        config["mail_to_create"],
        config["last_delivery_time"],
        seed=config["seed"],
        priority_rate=config["priority_rate"],
        max_team_size=min(config["robots"], MAX_TEAM_SIZE),
    )
    robots = create_robots(config["robots"], report, mail_pool, building, ids, clock=clock, verbose=verbose)
    automail = Automail(mail_pool, robots)

    trajectories: Dict[str, List[int]] = {r.id: [r.floor] for r in robots}
    completed = True
    while report.delivered_count < generator.mail_to_create:
        if clock.time >= config["max_ticks"]:
            completed = False
            if verbose:
                print(f"[sim] stopped at max_ticks={config['max_ticks']} "
                      f"with {report.delivered_count}/{generator.mail_to_create} delivered")
            break
        clock.tick()
        generator.add_to_pool(mail_pool, clock.time)
        automail.step()
        for robot in robots:
            trajectories[robot.id].append(robot.floor)

    validate_trajectories(trajectories, building.lowest_floor, building.top_floor)

    return {
        "config": config,
        "building": {
            "floors": building.floors,
            "lowest_floor": building.lowest_floor,
            "mailroom_floor": building.mailroom_floor,
        },
        "ticks": clock.time,
        "completed": completed,
        "mail_created": generator.mail_to_create,
        "robots": {rid: {"trajectory": floors} for rid, floors in trajectories.items()},
        "deliveries": report.deliveries(),
        "summary": report.summary(),
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the automail delivery simulation")
    parser.add_argument("--config", default=None, help="Path to config json")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--robots", type=int, default=None, help="Number of robots")
    parser.add_argument("--max_ticks", type=int, default=None, help="Stop after this many ticks")
    parser.add_argument("--output", default="simulation_output.json", help="Output JSON path")
    parser.add_argument("--verbose", action="store_true", help="Print robot and delivery trace")
    args = parser.parse_args()

    config = load_config(
        args.config,
        overrides={"seed": args.seed, "robots": args.robots, "max_ticks": args.max_ticks},
    )
    output = run_simulation(config, verbose=args.verbose)

    summary = output["summary"]
    print(f"Delivered: {summary['delivered']}/{output['mail_created']}")
    print(f"Final Delivery time: {summary['final_delivery_time']}")
    print(f"Final Score: {summary['total_score']:.2f}")

    with open(args.output, "w", encoding="utf-8") as f:
        json.dump(output, f, indent=2)
    print(f"Simulation written to: {args.output}")


if __name__ == "__main__":
    main()
