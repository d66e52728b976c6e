from enum import IntEnum


class AbilityId(IntEnum):
    NULL_NULL = 0
    SMART = 1
    TAUNT_TAUNT = 2
    STOP_STOP = 4
    STOP_CHEER = 6
    STOP_DANCE = 7
    HOLDFIRE_STOPSPECIAL = 10
    HOLDFIRE_HOLDFIRE = 11
    MOVE_MOVE = 16
    PATROL_PATROL = 17
    HOLDPOSITION_HOLD = 18
    SCAN_MOVE = 19
    MOVE_TURN = 20
    ATTACK_ATTACK = 23
    ATTACK_ATTACKTOWARDS = 24
    ATTACK_ATTACKBARRAGE = 25
    EFFECT_SPRAY_TERRAN = 26
    EFFECT_SPRAY_ZERG = 28
    EFFECT_SPRAY_PROTOSS = 30
    EFFECT_SALVAGE = 32
    BEHAVIOR_HOLDFIREON_GHOST = 36
    BEHAVIOR_HOLDFIREOFF_GHOST = 38
    MORPHTOINFESTEDTERRAN_INFESTEDTERRANS = 40
    EXPLODE_EXPLODE = 42
    FLEETBEACONRESEARCH_RESEARCHINTERCEPTORLAUNCHSPEEDUPGRADE = 44
    FUNGALGROWTH_FUNGALGROWTH = 74
    GUARDIANSHIELD_GUARDIANSHIELD = 76
    EFFECT_REPAIR_MULE = 78
    MORPHZERGLINGTOBANELING_BANELING = 80
    NEXUSTRAINMOTHERSHIP_MOTHERSHIP = 110
    FEEDBACK_FEEDBACK = 140
    EFFECT_MASSRECALL_STRATEGICRECALL = 142
    PLACEPOINTDEFENSEDRONE_POINTDEFENSEDRONE = 144
    HALLUCINATION_ARCHON = 146
    HALLUCINATION_COLOSSUS = 148
    HALLUCINATION_HIGHTEMPLAR = 150
    HALLUCINATION_IMMORTAL = 152
    HALLUCINATION_PHOENIX = 154
    HALLUCINATION_PROBE = 156
    HALLUCINATION_STALKER = 158
    HALLUCINATION_VOIDRAY = 160
    HALLUCINATION_WARPPRISM = 162
    HALLUCINATION_ZEALOT = 164
    HARVEST_GATHER_MULE = 166
    HARVEST_RETURN_MULE = 167
    SEEKERMISSILE_HUNTERSEEKERMISSILE = 169
    CALLDOWNMULE_CALLDOWNMULE = 171
    GRAVITONBEAM_GRAVITONBEAM = 173
    BUILDINPROGRESSNYDUSCANAL_CANCEL = 175
    SPAWNCHANGELING_SPAWNCHANGELING = 181
    RALLY_BUILDING = 195
    RALLY_MORPHING_UNIT = 199
    RALLY_COMMANDCENTER = 203
    RALLY_NEXUS = 207
    RALLY_HATCHERY_UNITS = 211
    RALLY_HATCHERY_WORKERS = 212
    RESEARCH_GLIALREGENERATION = 216
    RESEARCH_TUNNELINGCLAWS = 217
    INFESTEDTERRANS_INFESTEDTERRANS = 247
    NEURALPARASITE_NEURALPARASITE = 249
    SPAWNLARVA_SPAWNLARVA = 251
    STIMPACKMARAUDER_STIMPACKMARAUDER = 253
    SUPPLYDROP_SUPPLYDROP = 255
    ULTRALISKCAVERNRESEARCH_EVOLVEANABOLICSYNTHESIS2 = 263
    ULTRALISKCAVERNRESEARCH_EVOLVECHITINOUSPLATING = 265
    HARVEST_GATHER_SCV = 295
    HARVEST_RETURN_SCV = 296
    HARVEST_GATHER_PROBE = 298
    HARVEST_RETURN_PROBE = 299
    ATTACKPROTOSSBUILDING_ATTACKBUILDING = 301
    BUILD_CREEPTUMOR_TUMOR = 1733
    TERRANBUILD_COMMANDCENTER = 318
    TERRANBUILD_SUPPLYDEPOT = 319
    TERRANBUILD_REFINERY = 320
    TERRANBUILD_BARRACKS = 321
    TERRANBUILD_ENGINEERINGBAY = 322
    TERRANBUILD_MISSILETURRET = 323
    TERRANBUILD_BUNKER = 324
    TERRANBUILD_SENSORTOWER = 326
    TERRANBUILD_GHOSTACADEMY = 327
    TERRANBUILD_FACTORY = 328
    TERRANBUILD_STARPORT = 329
    TERRANBUILD_ARMORY = 331
    TERRANBUILD_FUSIONCORE = 333
    HALT_BUILDING = 315
    HALT_TERRANBUILD = 316
    STIMPACK_STIMPACK = 380
    GENERATECREEP_GENERATECREEP = 382
    QUEENBUILD_CREEPTUMOR = 1694
    SCANNERSWEEP_SCAN = 399
    YAMATO_YAMATOGUN = 401
    ASSAULTMODE_ASSAULTMODE = 403
    FIGHTERMODE_FIGHTERMODE = 405
    COMMANDCENTERTRAIN_SCV = 524
    UPGRADETOPLANETARYFORTRESS_PLANETARYFORTRESS = 1450
    UPGRADETOORBITAL_ORBITALCOMMAND = 1516
    MORPH_SUPPLYDEPOT_LOWER = 556
    MORPH_SUPPLYDEPOT_RAISE = 558
    BARRACKSTRAIN_MARINE = 560
    BARRACKSTRAIN_REAPER = 561
    BARRACKSTRAIN_GHOST = 562
    BARRACKSTRAIN_MARAUDER = 563
    FACTORYTRAIN_SIEGETANK = 591
    FACTORYTRAIN_THOR = 594
    FACTORYTRAIN_HELLION = 595
    TRAIN_HELLBAT = 596
    TRAIN_CYCLONE = 597
    FACTORYTRAIN_WIDOWMINE = 614
    STARPORTTRAIN_MEDIVAC = 620
    STARPORTTRAIN_BANSHEE = 621
    STARPORTTRAIN_RAVEN = 622
    STARPORTTRAIN_BATTLECRUISER = 623
    STARPORTTRAIN_VIKINGFIGHTER = 624
    STARPORTTRAIN_LIBERATOR = 626
    RESEARCH_HISECAUTOTRACKING = 650
    RESEARCH_TERRANSTRUCTUREARMORUPGRADE = 651
    ENGINEERINGBAYRESEARCH_TERRANINFANTRYWEAPONSLEVEL1 = 652
    ENGINEERINGBAYRESEARCH_TERRANINFANTRYWEAPONSLEVEL2 = 653
    ENGINEERINGBAYRESEARCH_TERRANINFANTRYWEAPONSLEVEL3 = 654
    RESEARCH_NEOSTEELFRAME = 655
    ENGINEERINGBAYRESEARCH_TERRANINFANTRYARMORLEVEL1 = 656
    ENGINEERINGBAYRESEARCH_TERRANINFANTRYARMORLEVEL2 = 657
    ENGINEERINGBAYRESEARCH_TERRANINFANTRYARMORLEVEL3 = 658
    BARRACKSTECHLABRESEARCH_STIMPACK = 730
    RESEARCH_COMBATSHIELD = 731
    RESEARCH_CONCUSSIVESHELLS = 732
    PROTOSSBUILD_NEXUS = 880
    PROTOSSBUILD_PYLON = 881
    PROTOSSBUILD_ASSIMILATOR = 882
    PROTOSSBUILD_GATEWAY = 883
    PROTOSSBUILD_FORGE = 884
    PROTOSSBUILD_FLEETBEACON = 885
    PROTOSSBUILD_TWILIGHTCOUNCIL = 886
    PROTOSSBUILD_PHOTONCANNON = 887
    PROTOSSBUILD_STARGATE = 889
    PROTOSSBUILD_TEMPLARARCHIVE = 890
    PROTOSSBUILD_DARKSHRINE = 891
    PROTOSSBUILD_ROBOTICSBAY = 892
    PROTOSSBUILD_ROBOTICSFACILITY = 893
    PROTOSSBUILD_CYBERNETICSCORE = 894
    BUILD_SHIELDBATTERY = 895
    GATEWAYTRAIN_ZEALOT = 916
    GATEWAYTRAIN_STALKER = 917
    GATEWAYTRAIN_HIGHTEMPLAR = 919
    GATEWAYTRAIN_DARKTEMPLAR = 920
    GATEWAYTRAIN_SENTRY = 921
    TRAIN_ADEPT = 922
    STARGATETRAIN_PHOENIX = 946
    STARGATETRAIN_CARRIER = 948
    STARGATETRAIN_VOIDRAY = 950
    STARGATETRAIN_ORACLE = 954
    STARGATETRAIN_TEMPEST = 955
    ROBOTICSFACILITYTRAIN_WARPPRISM = 976
    ROBOTICSFACILITYTRAIN_OBSERVER = 977
    ROBOTICSFACILITYTRAIN_COLOSSUS = 978
    ROBOTICSFACILITYTRAIN_IMMORTAL = 979
    TRAIN_DISRUPTOR = 994
    NEXUSTRAIN_PROBE = 1006
    PSISTORM_PSISTORM = 1036
    RESEARCH_PSISTORM = 1126
    ZERGBUILD_HATCHERY = 1152
    ZERGBUILD_CREEPTUMOR = 1153
    ZERGBUILD_EXTRACTOR = 1154
    ZERGBUILD_SPAWNINGPOOL = 1155
    ZERGBUILD_EVOLUTIONCHAMBER = 1156
    ZERGBUILD_HYDRALISKDEN = 1157
    ZERGBUILD_SPIRE = 1158
    ZERGBUILD_ULTRALISKCAVERN = 1159
    ZERGBUILD_INFESTATIONPIT = 1160
    ZERGBUILD_NYDUSNETWORK = 1161
    ZERGBUILD_BANELINGNEST = 1162
    BUILD_LURKERDEN = 1163
    ZERGBUILD_ROACHWARREN = 1165
    ZERGBUILD_SPINECRAWLER = 1166
    ZERGBUILD_SPORECRAWLER = 1167
    HARVEST_GATHER_DRONE = 1183
    HARVEST_RETURN_DRONE = 1184
    UPGRADETOLAIR_LAIR = 1216
    UPGRADETOHIVE_HIVE = 1218
    UPGRADETOGREATERSPIRE_GREATERSPIRE = 1220
    RESEARCH_ZERGLINGMETABOLICBOOST = 1253
    RESEARCH_ZERGLINGADRENALGLANDS = 1252
    LARVATRAIN_DRONE = 1342
    LARVATRAIN_ZERGLING = 1343
    LARVATRAIN_OVERLORD = 1344
    LARVATRAIN_HYDRALISK = 1345
    LARVATRAIN_MUTALISK = 1346
    LARVATRAIN_ULTRALISK = 1348
    LARVATRAIN_ROACH = 1351
    LARVATRAIN_INFESTOR = 1352
    LARVATRAIN_CORRUPTOR = 1353
    LARVATRAIN_VIPER = 1354
    TRAINQUEEN_QUEEN = 1632
    RESEARCH_WARPGATE = 1568
    RESEARCH_BLINK = 1593
    RESEARCH_CHARGE = 1594
    SIEGEMODE_SIEGEMODE = 388
    UNSIEGE_UNSIEGE = 390
    LOAD_BUNKER = 407
    UNLOADALL_BUNKER = 408
    LIFT_COMMANDCENTER = 417
    LAND_COMMANDCENTER = 419
    BUILD_TECHLAB_BARRACKS = 421
    BUILD_REACTOR_BARRACKS = 422
    LIFT_BARRACKS = 452
    BUILD_TECHLAB_FACTORY = 454
    BUILD_REACTOR_FACTORY = 455
    LIFT_FACTORY = 485
    BUILD_TECHLAB_STARPORT = 487
    BUILD_REACTOR_STARPORT = 488
    LIFT_STARPORT = 518
    LAND_FACTORY = 520
    LAND_STARPORT = 522
    LAND_BARRACKS = 554
    BUILD_NUKE = 710
    MORPH_BROODLORD = 1372
    WARPGATETRAIN_ZEALOT = 1413
    WARPGATETRAIN_STALKER = 1414
    WARPGATETRAIN_HIGHTEMPLAR = 1416
    WARPGATETRAIN_DARKTEMPLAR = 1417
    WARPGATETRAIN_SENTRY = 1418
    TRAINWARP_ADEPT = 1419
    EFFECT_BLINK_STALKER = 1442
    MORPH_OVERSEER = 1448
    MORPH_WARPGATE = 1518
    MORPH_GATEWAY = 1520
    LIFT_ORBITALCOMMAND = 1522
    LAND_ORBITALCOMMAND = 1524
    EFFECT_FORCEFIELD = 1526
    TACNUKESTRIKE_NUKECALLDOWN = 1622
    EFFECT_EMP = 1628
    TRANSFUSION_TRANSFUSION = 1664
    MORPH_ARCHON = 1766
    MORPH_RAVAGER = 2330
    MORPH_LURKER = 2332
    EFFECT_CORROSIVEBILE = 2338
    EFFECT_PURIFICATIONNOVA = 2346
    EFFECT_VOIDRAYPRISMATICALIGNMENT = 2393
    BUILD_STASISTRAP = 2505
    EFFECT_PARASITICBOMB = 2542
    EFFECT_ADEPTPHASESHIFT = 2544
    MORPH_LIBERATORAGMODE = 2558
    MORPH_LIBERATORAAMODE = 2560
    CANCEL = 3659
    HALT = 3660
    BURROWDOWN = 3661
    BURROWUP = 3662
    LOADALL = 3663
    UNLOADALL = 3664
    STOP = 3665
    HARVEST_GATHER = 3666
    HARVEST_RETURN = 3667
    CANCEL_LAST = 3671
    RALLY_UNITS = 3673
    ATTACK = 3674
    EFFECT_STIM = 3675
    LAND = 3678
    LIFT = 3679
    BUILD_TECHLAB = 3682
    BUILD_REACTOR = 3683
    EFFECT_REPAIR = 3685
    EFFECT_BLINK = 3687
    RALLY_WORKERS = 3690
    EFFECT_CHRONOBOOSTENERGYCOST = 3755
    HOLDPOSITION = 3793
    MOVE = 3794
    PATROL = 3795
