"""Zoo day -- the fixed demo dataset run through one simulated day.

Demonstrates:
- Building animals, workers and visitors for a Simulation
- Land/aquatic tour conflicts and the skip events they produce
- Printing the event log and the end-of-day report

Run: python -m examples.zoo_day
"""

from zooday import Animal, AnimalKind, Role, Simulation, Visitor, Worker


def build_dataset() -> tuple[list[Animal], list[Worker], list[Visitor]]:
    animals = [
        Animal("Skye", "Eagle", AnimalKind.FLYING, "Aviary A"),
        Animal("Splash", "Dolphin", AnimalKind.AQUATIC, "Aquarium 1"),
        Animal("Simba", "Lion", AnimalKind.LAND, "Savannah 2"),
        Animal("Momo", "Penguin", AnimalKind.AQUATIC, "Penguin Pool"),
    ]
    workers = [
        Worker("Dr. Maya", Role.DOCTOR),
        Worker("Alex", Role.FEEDER),
        Worker("Rina", Role.CLEANER),
    ]
    visitors = [Visitor("Alice"), Visitor("Bob"), Visitor("Carla")]
    return animals, workers, visitors


def main() -> None:
    animals, workers, visitors = build_dataset()
    sim = Simulation(animals, workers, visitors)

    report = sim.run()

    for line in sim.events.lines():
        print(line)
    for line in report.lines():
        print(line)
    print(f"(seed {report.seed})")


if __name__ == "__main__":
    main()
