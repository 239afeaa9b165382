from qrisk.risk_scores.coefficients import Coefficients
from qrisk.risk_scores.transforms import FractionalPolynomial, Transform

# Coefficients from the QRISK2-2011 open source release (ClinRisk Ltd.),
# http://svn.clinrisk.co.uk/opensource/qrisk2/
# Single BMI term, diabetes type 1 is not a separate factor in this version.

VERSION = "2011"
NAME = "QRISK2-2011"


TRANSFORM_FEMALE = Transform(
    age=(FractionalPolynomial(0.5), FractionalPolynomial(2)),
    bmi=(FractionalPolynomial(0.5),),
)

TRANSFORM_MALE = Transform(
    age=(FractionalPolynomial(-2), FractionalPolynomial(-2, times_log=True)),
    bmi=(FractionalPolynomial(0),),
)


COEFFICIENTS_FEMALE = Coefficients(
    mean_age_1=2.212557792663574,
    mean_age_2=23.965053558349609,
    mean_bmi_1=1.605302810668945,
    mean_bmi_2=None,
    mean_ratio=3.710259437561035,
    mean_systolic_bp=129.84271240234375,
    mean_townsend=-0.301369071006775,
    ethnicity=(
        0,  # Not recorded
        0,  # White
        0.27019974850158474,  # Indian
        0.58499258162221979,  # Pakistani
        0.29282934372548736,  # Bangladeshi
        0.045716959879045262,  # Other Asian
        -0.09410876199835877,  # Black Caribbean
        -0.55153621084141202,  # Black African
        -0.32763717335216208,  # Chinese
        -0.13325417447459287,  # Other ethnic group
    ),
    smoking=(
        0,  # Non smoker
        0.23277028105498029,  # Ex smoker
        0.48755846156358001,  # Light smoker
        0.62778345201293984,  # Moderate smoker
        0.76593093598352624,  # Heavy smoker
    ),
    age_1=5.3451763070030678,
    age_2=-0.014126998066528543,
    bmi_1=0.42651635817396105,
    bmi_2=None,
    ratio=0.14262738628806085,
    systolic_bp=0.011652645055112952,
    townsend=0.059631115336357191,
    atrial_fibrillation=1.2229035784229223,
    rheumatoid_arthritis=0.32700746085385957,
    renal_disease=0.78203596295411515,
    treated_hypertension=0.54817348363115603,
    diabetes_type1=None,
    diabetes_type2=0.85909189823248766,
    family_history=0.64383146172465788,
    age_1_times_smoking=(
        0.57153890847826705,
        -0.5974287351563502,
        -1.2334443621176749,
        -1.7283153973048535,
    ),
    age_1_times_atrial_fibrillation=-3.8277394672781142,
    age_1_times_renal_disease=-2.9025720400215884,
    age_1_times_treated_hypertension=-1.9524720689086561,
    age_1_times_diabetes_type1=None,
    age_1_times_diabetes_type2=-1.6599035893675749,
    age_1_times_bmi_1=-4.2607595722174354,
    age_1_times_bmi_2=None,
    age_1_times_family_history=-0.084359221900763046,
    age_1_times_systolic_bp=-0.01874411445993783,
    age_1_times_townsend=0.015836845082047014,
    age_2_times_smoking=(
        -0.012190813287691827,
        0.0045599556763008383,
        0.012735521497938558,
        0.018371922351253608,
    ),
    age_2_times_atrial_fibrillation=0.041138324099685396,
    age_2_times_renal_disease=0.035711195671512874,
    age_2_times_treated_hypertension=0.020053559624191336,
    age_2_times_diabetes_type1=None,
    age_2_times_diabetes_type2=0.016378765097141805,
    age_2_times_bmi_1=0.055334909162920387,
    age_2_times_bmi_2=None,
    age_2_times_family_history=-0.010070752832885353,
    age_2_times_systolic_bp=0.000048655850493983563,
    age_2_times_townsend=-0.0019506535670581145,
    baseline_survival=(
        0,
        0.998361468315125,
        0.996678650379181,
        0.99499785900116,
        0.993098974227905,
        0.991098940372467,
        0.989080786705017,
        0.98695957660675,
        0.98481959104538,
        0.982504785060883,
        0.980139017105103,
        0.977676749229431,
        0.975248038768768,
        0.972871840000153,
        0.97053050994873,
        0.968057155609131,
    ),
)

COEFFICIENTS_MALE = Coefficients(
    mean_age_1=0.044995188713074,
    mean_age_2=0.069769531488419,
    mean_bmi_1=0.967867195606232,
    mean_bmi_2=None,
    mean_ratio=4.458122253417969,
    mean_systolic_bp=133.24819946289062,
    mean_townsend=-0.164980158209801,
    ethnicity=(
        0,  # Not recorded
        0,  # White
        0.29512017222265091,  # Indian
        0.57745360841419557,  # Pakistani
        0.58567890510393561,  # Bangladeshi
        0.15573641242445102,  # Other Asian
        -0.4239684807026608,  # Black Caribbean
        -0.52985352791098639,  # Black African
        -0.34095605551067926,  # Chinese
        -0.2547523360677878,  # Other ethnic group
    ),
    smoking=(
        0,  # Non smoker
        0.26826883916112776,  # Ex smoker
        0.50421854393416277,  # Light smoker
        0.61865596420786984,  # Moderate smoker
        0.75848093713107034,  # Heavy smoker
    ),
    age_1=47.440923143257152,
    age_2=-103.96947785481335,
    bmi_1=0.44542126588796782,
    bmi_2=None,
    ratio=0.1531415988987079,
    systolic_bp=0.008648110165589782,
    townsend=0.032661685496224238,
    atrial_fibrillation=0.67249753457085182,
    rheumatoid_arthritis=0.28446758036295539,
    renal_disease=0.79344283847143438,
    treated_hypertension=0.55019286731942429,
    diabetes_type1=None,
    diabetes_type2=0.81027360624766853,
    family_history=0.75096252549160936,
    age_1_times_smoking=(
        -1.8114868938741493,
        -14.017892535548945,
        -12.2971507354086,
        -9.5995358645940403,
    ),
    age_1_times_atrial_fibrillation=-29.922928300989838,
    age_1_times_renal_disease=-55.554745781447508,
    age_1_times_treated_hypertension=31.018645246324326,
    age_1_times_diabetes_type1=None,
    age_1_times_diabetes_type2=-19.879608794470244,
    age_1_times_bmi_1=16.343708280978742,
    age_1_times_bmi_2=None,
    age_1_times_family_history=-26.317591423931624,
    age_1_times_systolic_bp=-0.22886637783694899,
    age_1_times_townsend=-2.8512030583797006,
    age_2_times_smoking=(
        6.3639267384563913,
        19.375617501205724,
        18.841564504919479,
        19.705940924328388,
    ),
    age_2_times_atrial_fibrillation=31.155757262658451,
    age_2_times_renal_disease=59.00280819091396,
    age_2_times_treated_hypertension=-14.619123938696021,
    age_2_times_diabetes_type1=None,
    age_2_times_diabetes_type2=29.201578302956563,
    age_2_times_bmi_1=-2.9965983324865419,
    age_2_times_bmi_2=None,
    age_2_times_family_history=35.682932396859897,
    age_2_times_systolic_bp=0.36473401471960243,
    age_2_times_townsend=3.3173634478389573,
    baseline_survival=(
        0,
        0.997251808643341,
        0.994411587715149,
        0.991577506065369,
        0.98843115568161,
        0.98508495092392,
        0.981717884540558,
        0.978166103363037,
        0.97457629442215,
        0.970824301242828,
        0.966860234737396,
        0.962876856327057,
        0.958815157413483,
        0.954597651958466,
        0.950800955295563,
        0.946760058403015,
    ),
)
