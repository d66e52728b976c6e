from enum import IntEnum


class UnitTypeId(IntEnum):
    NOTAUNIT = 0
    SYSTEM_SNAPSHOT_DUMMY = 1
    BALL = 2
    STEREOSCOPICOPTIONSUNIT = 3
    COLOSSUS = 4
    TECHLAB = 5
    REACTOR = 6
    INFESTORTERRAN = 7
    BANELINGCOCOON = 8
    BANELING = 9
    MOTHERSHIP = 10
    POINTDEFENSEDRONE = 11
    CHANGELING = 12
    CHANGELINGZEALOT = 13
    CHANGELINGMARINESHIELD = 14
    CHANGELINGMARINE = 15
    CHANGELINGZERGLINGWINGS = 16
    CHANGELINGZERGLING = 17
    COMMANDCENTER = 18
    SUPPLYDEPOT = 19
    REFINERY = 20
    BARRACKS = 21
    ENGINEERINGBAY = 22
    MISSILETURRET = 23
    BUNKER = 24
    SENSORTOWER = 25
    GHOSTACADEMY = 26
    FACTORY = 27
    STARPORT = 28
    ARMORY = 29
    FUSIONCORE = 30
    AUTOTURRET = 31
    SIEGETANKSIEGED = 32
    SIEGETANK = 33
    VIKINGASSAULT = 34
    VIKINGFIGHTER = 35
    COMMANDCENTERFLYING = 36
    BARRACKSTECHLAB = 37
    BARRACKSREACTOR = 38
    FACTORYTECHLAB = 39
    FACTORYREACTOR = 40
    STARPORTTECHLAB = 41
    STARPORTREACTOR = 42
    FACTORYFLYING = 43
    STARPORTFLYING = 44
    SCV = 45
    BARRACKSFLYING = 46
    SUPPLYDEPOTLOWERED = 47
    MARINE = 48
    REAPER = 49
    GHOST = 50
    MARAUDER = 51
    THOR = 52
    HELLION = 53
    MEDIVAC = 54
    BANSHEE = 55
    RAVEN = 56
    BATTLECRUISER = 57
    NUKE = 58
    NEXUS = 59
    PYLON = 60
    ASSIMILATOR = 61
    GATEWAY = 62
    FORGE = 63
    FLEETBEACON = 64
    TWILIGHTCOUNCIL = 65
    PHOTONCANNON = 66
    STARGATE = 67
    TEMPLARARCHIVE = 68
    DARKSHRINE = 69
    ROBOTICSBAY = 70
    ROBOTICSFACILITY = 71
    CYBERNETICSCORE = 72
    ZEALOT = 73
    STALKER = 74
    HIGHTEMPLAR = 75
    DARKTEMPLAR = 76
    SENTRY = 77
    PHOENIX = 78
    CARRIER = 79
    VOIDRAY = 80
    WARPPRISM = 81
    OBSERVER = 82
    IMMORTAL = 83
    PROBE = 84
    INTERCEPTOR = 85
    HATCHERY = 86
    CREEPTUMOR = 87
    EXTRACTOR = 88
    SPAWNINGPOOL = 89
    EVOLUTIONCHAMBER = 90
    HYDRALISKDEN = 91
    SPIRE = 92
    ULTRALISKCAVERN = 93
    INFESTATIONPIT = 94
    NYDUSNETWORK = 95
    BANELINGNEST = 96
    ROACHWARREN = 97
    SPINECRAWLER = 98
    SPORECRAWLER = 99
    LAIR = 100
    HIVE = 101
    GREATERSPIRE = 102
    EGG = 103
    DRONE = 104
    ZERGLING = 105
    OVERLORD = 106
    HYDRALISK = 107
    MUTALISK = 108
    ULTRALISK = 109
    ROACH = 110
    INFESTOR = 111
    CORRUPTOR = 112
    BROODLORDCOCOON = 113
    BROODLORD = 114
    BANELINGBURROWED = 115
    DRONEBURROWED = 116
    HYDRALISKBURROWED = 117
    ROACHBURROWED = 118
    ZERGLINGBURROWED = 119
    INFESTORTERRANBURROWED = 120
    REDSTONELAVACRITTERBURROWED = 121
    REDSTONELAVACRITTERINJUREDBURROWED = 122
    REDSTONELAVACRITTER = 123
    REDSTONELAVACRITTERINJURED = 124
    QUEENBURROWED = 125
    QUEEN = 126
    INFESTORBURROWED = 127
    OVERLORDCOCOON = 128
    OVERSEER = 129
    PLANETARYFORTRESS = 130
    ULTRALISKBURROWED = 131
    ORBITALCOMMAND = 132
    WARPGATE = 133
    ORBITALCOMMANDFLYING = 134
    FORCEFIELD = 135
    WARPPRISMPHASING = 136
    CREEPTUMORBURROWED = 137
    CREEPTUMORQUEEN = 138
    SPINECRAWLERUPROOTED = 139
    SPORECRAWLERUPROOTED = 140
    ARCHON = 141
    NYDUSCANAL = 142
    BROODLINGESCORT = 143
    GHOSTALTERNATE = 144
    GHOSTNOVA = 145
    RICHMINERALFIELD = 146
    RICHMINERALFIELD750 = 147
    URSADON = 148
    XELNAGATOWER = 149
    INFESTEDTERRANSEGG = 150
    LARVA = 151
    MULE = 268
    BROODLING = 289
    ADEPT = 311
    MINERALFIELD = 341
    VESPENEGEYSER = 342
    SPACEPLATFORMGEYSER = 343
    RICHVESPENEGEYSER = 344
    MINERALFIELD750 = 483
    HELLIONTANK = 484
    MOTHERSHIPCORE = 488
    LOCUSTMP = 489
    SWARMHOSTBURROWEDMP = 493
    SWARMHOSTMP = 494
    ORACLE = 495
    TEMPEST = 496
    WIDOWMINE = 498
    VIPER = 499
    WIDOWMINEBURROWED = 500
    LURKERMPEGG = 501
    LURKERMP = 502
    LURKERMPBURROWED = 503
    LURKERDENMP = 504
    PROTOSSVESPENEGEYSER = 608
    LABMINERALFIELD = 665
    LABMINERALFIELD750 = 666
    RAVAGERCOCOON = 687
    RAVAGER = 688
    LIBERATOR = 689
    RAVAGERBURROWED = 690
    THORAP = 691
    CYCLONE = 692
    LOCUSTMPFLYING = 693
    DISRUPTOR = 694
    ORACLESTASISTRAP = 732
    DISRUPTORPHASED = 733
    LIBERATORAG = 734
    PURIFIERRICHMINERALFIELD = 796
    PURIFIERRICHMINERALFIELD750 = 797
    ADEPTPHASESHIFT = 801
    PARASITICBOMBDUMMY = 824
    KD8CHARGE = 830
    PURIFIERVESPENEGEYSER = 880
    SHAKURASVESPENEGEYSER = 881
    PURIFIERMINERALFIELD = 884
    PURIFIERMINERALFIELD750 = 885
    BATTLESTATIONMINERALFIELD = 886
    BATTLESTATIONMINERALFIELD750 = 887
    TRANSPORTOVERLORDCOCOON = 892
    OVERLORDTRANSPORT = 893
    SHIELDBATTERY = 1910
    OBSERVERSIEGEMODE = 1911
    OVERSEERSIEGEMODE = 1912
    RAVENREPAIRDRONE = 1913
    REFINERYRICH = 1943
    ASSIMILATORRICH = 1980
    EXTRACTORRICH = 1981
