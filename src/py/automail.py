from typing import List


class Automail:
    """Steps the mail pool, then every active actor, once per tick.

    Actors are robots and robot teams. A team formed by the pool takes its
    members' places in the actor list and is stepped in the same tick;
    members released by a team rejoin the list for the next tick.
    """

    def __init__(self, mail_pool, robots: List):
        self.mail_pool = mail_pool
        self.actors: List = list(robots)

    def adopt(self, actor) -> None:
        members = {id(robot) for robot in actor.list_robots()}
        self.actors = [a for a in self.actors if id(a) not in members]
        self.actors.append(actor)

    def step(self) -> None:
        for team in self.mail_pool.step():
            self.adopt(team)
        spawned: List = []
        for actor in list(self.actors):
            spawned.extend(actor.step())
        self.actors = [a for a in self.actors if a.is_active()] + spawned

    def robots(self) -> List:
        result = []
        for actor in self.actors:
            result.extend(actor.list_robots())
        return result
