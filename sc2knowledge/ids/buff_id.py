from enum import IntEnum


class BuffId(IntEnum):
    NULL = 0
    RADAR25 = 1
    TAUNTB = 2
    DISABLEABILS = 3
    TRANSIENTMORPH = 4
    GRAVITONBEAM = 5
    GHOSTCLOAK = 6
    BANSHEECLOAK = 7
    POWERUSERWARPABLE = 8
    VORTEXBEHAVIORENEMY = 9
    CORRUPTION = 10
    QUEENSPAWNLARVATIMER = 11
    GHOSTHOLDFIRE = 12
    GHOSTHOLDFIREB = 13
    LEECH = 14
    LEECHDISABLEABILITIES = 15
    EMPDECLOAK = 16
    FUNGALGROWTH = 17
    GUARDIANSHIELD = 18
    SEEKERMISSILETIMEOUT = 19
    TIMEWARPPRODUCTION = 20
    ETHEREAL = 21
    NEURALPARASITE = 22
    NEURALPARASITEWAIT = 23
    STIMPACKMARAUDER = 24
    SUPPLYDROP = 25
    _250MMSTRIKECANNONS = 26
    STIMPACK = 27
    PSISTORM = 28
    CLOAKFIELDEFFECT = 29
    CHARGING = 30
    AIDANGERBUFF = 31
    VORTEXBEHAVIOR = 32
    SLOW = 33
    TEMPORALRIFTUNIT = 34
    SHEEPBUSY = 35
    CONTAMINATED = 36
    TIMESCALECONVERSIONBEHAVIOR = 37
    BLINDINGCLOUDSTRUCTURE = 38
    COLLAPSIBLEROCKTOWERCONJOINEDSEARCH = 39
    COLLAPSIBLEROCKTOWERRAMPDIAGONALCONJOINEDSEARCH = 40
    COLLAPSIBLETERRANTOWERCONJOINEDSEARCH = 41
    COLLAPSIBLETERRANTOWERRAMPDIAGONALCONJOINEDSEARCH = 42
    DIGESTERCREEPSPRAYVISION = 43
    INVULNERABILITYSHIELD = 44
    MINEDRONECOUNTDOWN = 45
    MOTHERSHIPSTASIS = 46
    MOTHERSHIPSTASISCASTER = 47
    MOTHERSHIPCOREENERGIZEVISUAL = 48
    ORACLEREVELATION = 49
    GHOSTSNIPEDOT = 50
    NEXUSPHASESHIFT = 51
    NEXUSINVULNERABILITY = 52
    ROUGHTERRAINSEARCH = 53
    ROUGHTERRAINSLOW = 54
    ORACLECLOAKFIELD = 55
    ORACLECLOAKFIELDEFFECT = 56
    SCRYERFRIENDLY = 57
    SPECTRESHIELD = 58
    VIPERCONSUMESTRUCTURE = 59
    RESTORESHIELDS = 60
    MERCENARYCYCLONEMISSILES = 61
    MERCENARYSENSORDISH = 62
    MERCENARYSHIELD = 63
    SCRYER = 64
    STUNROUNDINITIALBEHAVIOR = 65
    BUILDINGSHIELD = 66
    LASERSIGHT = 67
    PROTECTIVEBARRIER = 68
    CORRUPTORGROUNDATTACKDEBUFF = 69
    BATTLECRUISERANTIAIRDISABLE = 70
    BUILDINGSTASIS = 71
    STASIS = 72
    RESOURCESTUN = 73
    MAXIMUMTHRUST = 74
    CHARGEUP = 75
    CLOAKUNIT = 76
    NULLFIELD = 77
    RESCUE = 78
    BENIGN = 79
    LASERTARGETING = 80
    ENGAGE = 81
    CAPRESOURCE = 82
    BLINDINGCLOUD = 83
    DOOMDAMAGEDELAY = 84
    EYESTALK = 85
    BURROWCHARGE = 86
    HIDDEN = 87
    MINEDRONEDOT = 88
    MEDIVACSPEEDBOOST = 89
    EXTENDBRIDGEEXTENDINGBRIDGENEWIDE8OUT = 90
    CARRYMINERALFIELDMINERALS = 271
    CARRYHIGHYIELDMINERALFIELDMINERALS = 272
    CARRYHARVESTABLEVESPENEGEYSERGAS = 273
    CARRYHARVESTABLEVESPENEGEYSERGASPROTOSS = 274
    CARRYHARVESTABLEVESPENEGEYSERGASZERG = 275
    CHRONOBOOSTENERGYCOST = 281
