# wave_based_method/simulation.py
import logging
from collections import OrderedDict

from tqdm import tqdm

from . import formula
from .complex_matrix import format_matrix, multiply
from .defaults import MODE_CONFIG, PHYSICS_PARAMS, REFERENCE_PLATE, REFERENCE_ROOMS
from .errors import InvalidOperation
from .geometry import Plate, Room, RoomRole, Scenario

logger = logging.getLogger(__name__)

# report() 中的标题 (对应公式编号)
REPORT_TITLES = OrderedDict([
    ('kz1', "Formula 2.36 - kz1"),
    ('kz2', "Formula 2.36 - kz2"),
    ('kz3', "Formula 2.36 - kz3"),
    ('F', "Formula 2.74 - F"),
    ('C11', "Formula 2.84 - C11"),
    ('C12', "Formula 2.85 - C12"),
    ('N1', "Formula 2.86 - N1"),
    ('N2', "Formula 2.86 - N2"),
    ('N3', "Formula 2.86 - N3"),
    ('Prp', "Formula 2.87 - plate room projection coefficients [0][0]"),
    ('wp', "Formula 2.91 - plate eigenfrequencies"),
    ('C13', "Formula 2.96 - C13"),
    ('C23', "Formula 2.98 - C23"),
    ('Np', "Formula 2.102 - plate mode norms"),
    ('plate_excitation', "C13 x Prp - modal plate excitation"),
])


def reference_scenario():
    """参考算例: 三个房间 + 一块板"""
    scenario = Scenario()
    for room_kwargs in REFERENCE_ROOMS:
        scenario.add(Room(**room_kwargs))
    scenario.add(Plate.from_material(**REFERENCE_PLATE))
    return scenario


class WaveBasedSimulator:
    """
    高层封装接口：把算例 (房间 + 板) 和物理常数送入所有公式，返回命名结果。
    """
    def __init__(self, physics_config=None, mode_config=None):
        self.params = PHYSICS_PARAMS.copy()
        if physics_config:
            self.params.update(physics_config)

        self.mode_config = MODE_CONFIG.copy()
        if mode_config:
            self.mode_config.update(mode_config)

    def update_params(self, **kwargs):
        """
        更新物理常数或模态阶数，避免重新创建对象
        """
        for key, value in kwargs.items():
            if key in self.params:
                self.params[key] = value
            elif key in self.mode_config:
                self.mode_config[key] = value
            else:
                raise KeyError(f"Unknown parameter: {key}")

    def _steps(self, source, intermediate, receiving, plate):
        f, c, rho_air = self.params['f'], self.params['c'], self.params['rho_air']
        M, N = self.mode_config['M'], self.mode_config['N']
        P, Q = self.mode_config['P'], self.mode_config['Q']

        return [
            ('kz1', lambda r: formula.acoustic_wave_expansion(source, f, c, M, N)),
            ('kz2', lambda r: formula.acoustic_wave_expansion(intermediate, f, c, M, N)),
            ('kz3', lambda r: formula.acoustic_wave_expansion(receiving, f, c, M, N)),
            ('F', lambda r: formula.source_projection(source, M, N)),
            ('C11', lambda r: formula.compute_c1(source, f, c, M, N)),
            ('C12', lambda r: formula.compute_c2(source, f, c, M, N)),
            ('N1', lambda r: formula.norms_of_room_wave_functions(source, M, N)),
            ('N2', lambda r: formula.norms_of_room_wave_functions(intermediate, M, N)),
            ('N3', lambda r: formula.norms_of_room_wave_functions(receiving, M, N)),
            ('Prp', lambda r: formula.plate_room_projection_coefficients(plate, source, M, N, P, Q)),
            ('wp', lambda r: formula.simply_supported_plate_eigenfrequencies(plate, P, Q)),
            ('C13', lambda r: formula.compute_c3(source, f, c, rho_air, M, N)),
            ('C23', lambda r: formula.compute_c3(intermediate, f, c, rho_air, M, N)),
            ('Np', lambda r: formula.norms_of_plate_modes(plate, P, Q)),
            ('plate_excitation', lambda r: multiply(r['C13'], r['Prp'])),
        ]

    def evaluate(self, scenario, progress=False):
        """
        标准接口：输入算例，返回所有公式的结果

        Args:
            scenario (Scenario): 需要声源、中间、接收房间各一个，以及至少一块板
            progress (bool): 是否显示 tqdm 进度条

        Returns:
            OrderedDict: 名称 -> numpy 复数数组
        """
        source = scenario.room_with_role(RoomRole.SOURCE)
        intermediate = scenario.room_with_role(RoomRole.INTERMEDIATE)
        receiving = scenario.room_with_role(RoomRole.RECEIVING)
        missing = [role.value for role, room in
                   [(RoomRole.SOURCE, source), (RoomRole.INTERMEDIATE, intermediate),
                    (RoomRole.RECEIVING, receiving)] if room is None]
        if missing:
            raise InvalidOperation(f"Scenario has no {', '.join(missing)} room")
        if not scenario.plates:
            raise InvalidOperation("Scenario has no plate")
        plate = scenario.plates[0]

        logger.info("Evaluating scenario at f=%s Hz, modes=%s", self.params['f'], self.mode_config)
        results = OrderedDict()
        steps = self._steps(source, intermediate, receiving, plate)
        for name, step in tqdm(steps, desc="WBM formulas", disable=not progress):
            results[name] = step(results)
            logger.debug("%s: shape %s", name, results[name].shape)
        return results

    @staticmethod
    def report(results):
        """把结果渲染成文本 (4D 投影系数只输出 [0][0] 切片)"""
        blocks = []
        for name, title in REPORT_TITLES.items():
            if name not in results:
                continue
            matrix = results[name]
            if matrix.ndim == 4:
                matrix = matrix[0, 0]
            blocks.append(title + "\n" + format_matrix(matrix))
        return "\n".join(blocks)
