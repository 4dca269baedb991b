# raidseeker

A library for Max Raid Battles in Pokémon Sword and Shield:

- `raidseeker.rng.XoroShiro`, the game's Xoroshiro128+ random number
  generator, with `next()` and mask-and-reject `next_int(maximum)`;
- `raidseeker.raid_generator.RaidGenerator`, which turns a den seed into the
  Pokémon it will produce (encryption constant, PID, shininess, IVs, ability,
  gender, nature) over a range of advances;
- `raidseeker.state_filter.StateFilter`, which filters generated results;
- den tables (`raidseeker.den_data`), den loading (`raidseeker.den_loader`) and
  species data parsing (`raidseeker.personal_loader`);
- clients that drive a console running sys-botbase over TCP to read den data,
  collect watts and reset the game (`raidseeker.bot_core`,
  `raidseeker.swsh_bot`, `raidseeker.raid_bot`).

It has no third-party dependencies.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Generating raids

Species data must be loaded before raids are built, since each raid looks up
its species' gender ratio:

```python
from raidseeker import den_loader, personal_loader
from raidseeker.profile import Game
from raidseeker.raid_generator import RaidGenerator
from raidseeker.state_filter import StateFilter

with open("personal_swsh", "rb") as fh:
    personal_loader.init(fh.read())
with open("nests", "rb") as fh:
    den_loader.init(fh.read(), "data")  # also reads data/nests_event.json if present

den = den_loader.get_den(0, 0)          # den index 0, normal rarity
raid = den.get_raid(0, Game.SWORD)

generator = RaidGenerator(0, 1000, 12345, 54321, raid)
for state in generator.generate(StateFilter(), 0x0123456789ABCDEF):
    print(state.advances, hex(state.pid), state.ivs, state.nature)
```

`personal_loader.get_info(species, form)` returns a `PersonalInfo` with base
stats, gender ratio, abilities and form data. `den_loader.get_den(65535, ...)`
returns the event den. `Raid` offers `min_stars()`, `max_stars()` and
`star_display()` (for example `1-3★`).

`StateFilter` restricts results by `gender`, `ability`, `shiny`, `min_ivs`,
`max_ivs` and `natures`; a value of 255 for gender, ability or shiny means
"any", and `skip=True` accepts everything. Each `State` also has
`characteristic()`.

`raidseeker.den_data` gives each den's table hash (`den_hash(index, rarity)`),
map location (`get_location(index)`) and coordinates
(`get_coordinates(index)`).

## Trainer profiles

`raidseeker.profile.Profile` holds a name, TID, SID and `Game` version, with
`version_string()` giving `Sword` or `Shield`. The package does not store
profiles: saving and loading them to a file is left to the caller.

## Talking to a console

`BotCore`, `SWSHBot` and `RaidBot` connect to sys-botbase and send its text
commands (`click`, `press`, `release`, `setStick`, `peek`, `poke`, ...). If the
connection fails, `is_connected()` is false and commands are not sent. They are
context managers that detach the controller and disconnect on exit:

```python
from raidseeker.raid_bot import RaidBot

with RaidBot("192.168.0.10", 6000) as bot:
    bot.set_target_den(1)
    print(bot.get_den_data().hex())
```

`SWSHBot` reads the trainer block on connection to set `tid`, `sid` and
`is_playing_sword`, and offers reads of party, box, trade, wild, raid, den and
event data, along with `quit_game()`, `enter_game()`, `skip_intro_animation()`
and `save_game()`. `RaidBot` adds `get_watts()`, `read_watts()` and
`throw_piece()`.

## What it does not do

The package is a library only: it has no command-line program and no
graphical interface, and it does not run the automated search loops (seed
hunting, star hunting, watt farming) by itself; those are built by calling the
bot and generator classes.