from enum import IntEnum


class UpgradeId(IntEnum):
    NULL = 0
    CARRIERLAUNCHSPEEDUPGRADE = 1
    GLIALRECONSTITUTION = 2
    TUNNELINGCLAWS = 3
    CHITINOUSPLATING = 4
    HISECAUTOTRACKING = 5
    TERRANBUILDINGARMOR = 6
    TERRANINFANTRYWEAPONSLEVEL1 = 7
    TERRANINFANTRYWEAPONSLEVEL2 = 8
    TERRANINFANTRYWEAPONSLEVEL3 = 9
    NEOSTEELFRAME = 10
    TERRANINFANTRYARMORSLEVEL1 = 11
    TERRANINFANTRYARMORSLEVEL2 = 12
    TERRANINFANTRYARMORSLEVEL3 = 13
    REAPERSPEED = 14
    STIMPACK = 15
    SHIELDWALL = 16
    PUNISHERGRENADES = 17
    SIEGETECH = 18
    HIGHCAPACITYBARRELS = 19
    BANSHEECLOAK = 20
    MEDIVACCADUCEUSREACTOR = 21
    RAVENCORVIDREACTOR = 22
    HUNTERSEEKER = 23
    DURABLEMATERIALS = 24
    PERSONALCLOAKING = 25
    GHOSTMOEBIUSREACTOR = 26
    TERRANVEHICLEARMORSLEVEL1 = 27
    TERRANVEHICLEARMORSLEVEL2 = 28
    TERRANVEHICLEARMORSLEVEL3 = 29
    TERRANVEHICLEWEAPONSLEVEL1 = 30
    TERRANVEHICLEWEAPONSLEVEL2 = 31
    TERRANVEHICLEWEAPONSLEVEL3 = 32
    TERRANSHIPARMORSLEVEL1 = 33
    TERRANSHIPARMORSLEVEL2 = 34
    TERRANSHIPARMORSLEVEL3 = 35
    TERRANSHIPWEAPONSLEVEL1 = 36
    TERRANSHIPWEAPONSLEVEL2 = 37
    TERRANSHIPWEAPONSLEVEL3 = 38
    PROTOSSGROUNDWEAPONSLEVEL1 = 39
    PROTOSSGROUNDWEAPONSLEVEL2 = 40
    PROTOSSGROUNDWEAPONSLEVEL3 = 41
    PROTOSSGROUNDARMORSLEVEL1 = 42
    PROTOSSGROUNDARMORSLEVEL2 = 43
    PROTOSSGROUNDARMORSLEVEL3 = 44
    PROTOSSSHIELDSLEVEL1 = 45
    PROTOSSSHIELDSLEVEL2 = 46
    PROTOSSSHIELDSLEVEL3 = 47
    OBSERVERGRAVITICBOOSTER = 48
    GRAVITICDRIVE = 49
    EXTENDEDTHERMALLANCE = 50
    HIGHTEMPLARKHAYDARINAMULET = 51
    PSISTORMTECH = 52
    ZERGMELEEWEAPONSLEVEL1 = 53
    ZERGMELEEWEAPONSLEVEL2 = 54
    ZERGMELEEWEAPONSLEVEL3 = 55
    ZERGGROUNDARMORSLEVEL1 = 56
    ZERGGROUNDARMORSLEVEL2 = 57
    ZERGGROUNDARMORSLEVEL3 = 58
    ZERGMISSILEWEAPONSLEVEL1 = 59
    ZERGMISSILEWEAPONSLEVEL2 = 60
    ZERGMISSILEWEAPONSLEVEL3 = 61
    OVERLORDSPEED = 62
    OVERLORDTRANSPORT = 63
    BURROW = 64
    ZERGLINGATTACKSPEED = 65
    ZERGLINGMOVEMENTSPEED = 66
    HYDRALISKSPEED = 67
    ZERGFLYERWEAPONSLEVEL1 = 68
    ZERGFLYERWEAPONSLEVEL2 = 69
    ZERGFLYERWEAPONSLEVEL3 = 70
    ZERGFLYERARMORSLEVEL1 = 71
    ZERGFLYERARMORSLEVEL2 = 72
    ZERGFLYERARMORSLEVEL3 = 73
    INFESTORENERGYUPGRADE = 74
    CENTRIFICALHOOKS = 75
    BATTLECRUISERENABLESPECIALIZATIONS = 76
    BATTLECRUISERBEHEMOTHREACTOR = 77
    PROTOSSAIRWEAPONSLEVEL1 = 78
    PROTOSSAIRWEAPONSLEVEL2 = 79
    PROTOSSAIRWEAPONSLEVEL3 = 80
    PROTOSSAIRARMORSLEVEL1 = 81
    PROTOSSAIRARMORSLEVEL2 = 82
    PROTOSSAIRARMORSLEVEL3 = 83
    WARPGATERESEARCH = 84
    HALTECH = 85
    CHARGE = 86
    BLINKTECH = 87
    ANABOLICSYNTHESIS = 88
    OBVERSEINCUBATION = 89
    VIKINGJOTUNBOOSTERS = 90
    ORGANICCARAPACE = 91
    INFESTORPERISTALSIS = 92
    ABDOMINALFORTITUDE = 93
    HYDRALISKSPEEDUPGRADE = 94
    BANELINGBURROWMOVE = 95
    COMBATDRUGS = 96
    STRIKECANNONS = 97
    TRANSFORMATIONSERVOS = 98
    PHOENIXRANGEUPGRADE = 99
    TEMPESTRANGEUPGRADE = 100
    NEURALPARASITE = 101
    LOCUSTLIFETIMEINCREASE = 102
    ULTRALISKBURROWCHARGEUPGRADE = 103
    ORACLEENERGYUPGRADE = 104
    RESTORESHIELDS = 105
    PROTOSSHEROSHIPWEAPON = 106
    PROTOSSHEROSHIPDETECTOR = 107
    PROTOSSHEROSHIPSPELL = 108
    REAPERJUMP = 109
    INCREASEDRANGE = 110
    ZERGBURROWMOVE = 111
    ANIONPULSECRYSTALS = 112
    LURKERRANGE = 127
    DIGGINGCLAWS = 293
    ENHANCEDSHOCKWAVES = 296
